"""Security technology probed by ConditionSecurity=/AssertSecurity=."""

from enum import Enum


class SecurityTech(str, Enum):
    SELINUX = "selinux"
    APPARMOR = "apparmor"
    TOMOYO = "tomoyo"
    SMACK = "smack"
    IMA = "ima"
    AUDIT = "audit"
    UEFI_SECUREBOOT = "uefi-secureboot"
    TPM2 = "tpm2"
    CVM = "cvm"
    MEASURED_UKI = "measured-uki"
