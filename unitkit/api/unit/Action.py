"""System action for failure/success/timeout/rate-limit triggers."""

from enum import Enum


class Action(str, Enum):
    NONE = "none"
    REBOOT = "reboot"
    REBOOT_FORCE = "reboot-force"
    REBOOT_IMMEDIATE = "reboot-immediate"
    POWEROFF = "poweroff"
    POWEROFF_FORCE = "poweroff-force"
    POWEROFF_IMMEDIATE = "poweroff-immediate"
    EXIT = "exit"
    EXIT_FORCE = "exit-force"
    SOFT_REBOOT = "soft-reboot"
    SOFT_REBOOT_FORCE = "soft-reboot-force"
    KEXEC = "kexec"
    KEXEC_FORCE = "kexec-force"
    HALT = "halt"
    HALT_FORCE = "halt-force"
    HALT_IMMEDIATE = "halt-immediate"
