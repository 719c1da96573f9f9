"""Model family keys used to register and look up prompt variants."""

from enum import Enum


class ModelFamily(str, Enum):
    GENERIC = "generic"
    NEXT_GEN = "next-gen"
    XS = "xs"
    GPT_5 = "gpt-5"
    NATIVE_NEXT_GEN = "native-next-gen"
    NATIVE_GPT_5 = "native-gpt-5"
