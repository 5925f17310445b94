"""CPU architecture probed by ConditionArchitecture=/AssertArchitecture=."""

from enum import Enum


class Architecture(str, Enum):
    X86 = "x86"
    X86_64 = "x86-64"
    PPC = "ppc"
    PPC_LE = "ppc-le"
    PPC64 = "ppc64"
    PPC64_LE = "ppc64-le"
    IA64 = "ia64"
    PARISC = "parisc"
    PARISC64 = "parisc64"
    S390 = "s390"
    S390X = "s390x"
    SPARC = "sparc"
    SPARC64 = "sparc64"
    MIPS = "mips"
    MIPS_LE = "mips-le"
    MIPS64 = "mips64"
    MIPS64_LE = "mips64-le"
    ALPHA = "alpha"
    ARM = "arm"
    ARM_BE = "arm-be"
    ARM64 = "arm64"
    ARM64_BE = "arm64-be"
    SH = "sh"
    SH64 = "sh64"
    M68K = "m68k"
    TILEGX = "tilegx"
    CRIS = "cris"
    ARC = "arc"
    ARC_BE = "arc-be"
    NATIVE = "native"
