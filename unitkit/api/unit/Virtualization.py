"""Virtualization probed by ConditionVirtualization=/AssertVirtualization=."""

from enum import Enum


class Virtualization(str, Enum):
    VM = "vm"
    CONTAINER = "container"
    QEMU = "qemu"
    KVM = "kvm"
    AMAZON = "amazon"
    ZVM = "zvm"
    VMWARE = "vmware"
    MICROSOFT = "microsoft"
    ORACLE = "oracle"
    POWERVM = "powervm"
    XEN = "xen"
    BOCHS = "bochs"
    UML = "uml"
    BHYVE = "bhyve"
    QNX = "qnx"
    APPLE = "apple"
    SRE = "sre"
    OPENVZ = "openvz"
    LXC = "lxc"
    LXC_LIBVIRT = "lxc-libvirt"
    SYSTEMD_NSPAWN = "systemd-nspawn"
    DOCKER = "docker"
    PODMAN = "podman"
    RKT = "rkt"
    WSL = "wsl"
    PROOT = "proot"
    POUCH = "pouch"
    ACRN = "acrn"
    PRIVATE_USERS = "private-users"
