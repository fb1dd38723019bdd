# prc_keygen/constants.py

SOURCE_EXTENSION = "cxx"
PLACEHOLDER = "#"

# RSA parameters for every generated trust level key
KEY_BITS = 2048
PUBLIC_EXPONENT = 65537

# Symbol bases for the emitted string constants
PUBKEY_SYMBOL = "prc_pubkey"
PRIVKEY_SYMBOL = "prc_privkey"
PUBKEY_TABLE = "prc_pubkeys"
PUBKEY_COUNT = "num_prc_pubkeys"

REGISTRY_HEADER = "prcKeyRegistry.h"
SIGN_TEMPLATE = "signPrcFile_src.cxx"

TOOL_NAME = "make-prc-key"
