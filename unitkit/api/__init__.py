"""API module for unitkit.

Unit file models live in ``unitkit.api.unit``; systemctl control lives in
``unitkit.api.service``.
"""

__all__: list[str] = []
