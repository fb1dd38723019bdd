"""
prc_keygen
==========
Build-time key generation for signed prc files.

Provides:
- Batch RSA key generation, one key per trust level
- C/C++ string-literal encoding of PEM key material
- The public key table for the verifier and a signing program source per level
"""
