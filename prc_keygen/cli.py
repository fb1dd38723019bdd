"""
make-prc-key command line.

This is the only place a failure turns into an exit status: library code
raises PrcKeyError subclasses, main() logs them and returns 1.
"""

from __future__ import annotations
from typing import List, Optional
import argparse, logging, sys

from .config import Settings, load_settings
from .constants import TOOL_NAME
from .crypto import CryptoProvider
from .errors import CryptoProviderError, InvalidArgument, PrcKeyError
from .generator import generate_keys
from .keyspec import parse_key_specs
from .logger import get_logger
from .naming import check_extension
from .registry import KeyRegistry, load_registry_provider

USAGE = f"""
{TOOL_NAME} [opts] 1[,"pass_phrase"] [2[,"pass phrase"] 3 ...]

This program generates one or more new keys to be used for signing
a prc file.  Each key is divided into a public and a private key; the
public key is not secret and will be compiled into libdtool, while the
private key should be safeguarded and will be written into a .cxx file
that can be compiled as a standalone application.

The remaining arguments list the individual trust level keys to
generate.  For each integer specified, a different key will be created.
A typical application will only need one or two keys.

Options:

   -a pub_outfile.cxx
       The public key output file to generate.  If omitted, the file named
       by PRC_PUBLIC_KEYS_FILENAME is rewritten, keeping the keys it
       already holds for levels not generated by this run.

   -b priv_outfile#.cxx
       The private key output file(s) to generate, one per trust level.
       A '#' in the name is replaced by the trust level.  Without a '#',
       level 1 is written to the name as given and other levels get
       their number appended.

   -p "[pass phrase]"
       Pass phrase used to encrypt every private key, unless a key gives
       its own with the key,"pass phrase" syntax.  If no pass phrase is
       given you will be prompted interactively.  The empty string ("")
       writes the keys unencrypted.
"""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise InvalidArgument(message)


_VALUE_OPTIONS = ("-a", "-b", "-p")


def attach_option_values(argv: List[str]) -> List[str]:
    """Glue each option value onto its flag (`-p -x` becomes `-p-x`), so a
    value that starts with '-' is taken as the value, as getopt would."""
    out: List[str] = []
    it = iter(argv)
    for tok in it:
        if tok in _VALUE_OPTIONS:
            value = next(it, None)
            if value is None:
                out.append(tok)
            elif value.startswith("-"):
                out.append(tok + value)
            else:
                out.extend((tok, value))
        else:
            out.append(tok)
    return out


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog=TOOL_NAME, add_help=False, usage=argparse.SUPPRESS)
    parser.add_argument("-a", dest="pub_outfile")
    parser.add_argument("-b", dest="priv_outfile")
    parser.add_argument("-p", dest="pass_phrase")
    parser.add_argument("-h", dest="help", action="store_true")
    parser.add_argument("keys", nargs="*")
    return parser


def run(argv: List[str], settings: Settings, provider: Optional[CryptoProvider] = None) -> int:
    args = build_parser().parse_args(attach_option_values(argv))
    if args.help:
        sys.stderr.write(USAGE + "\n")
        return 0
    if not args.keys:
        sys.stderr.write(USAGE + "\n")
        raise InvalidArgument("No trust levels specified.")

    if args.pub_outfile is not None:
        check_extension(args.pub_outfile, "Public key")
        pub_outfile = args.pub_outfile
    elif settings.public_keys_filename:
        pub_outfile = settings.public_keys_filename
    else:
        raise InvalidArgument("No -a specified, and no PRC_PUBLIC_KEYS_FILENAME configured.")

    if args.priv_outfile is None:
        raise InvalidArgument("You must use the -b option to specify the private key output filenames.")
    check_extension(args.priv_outfile, "Private key")

    # every argument is validated before the first key is generated
    key_specs = parse_key_specs(args.keys, args.pass_phrase, args.pass_phrase is not None)

    registry = KeyRegistry()
    if args.pub_outfile is None:
        # seed from the keys the verifier was last built with
        existing = load_registry_provider(settings.registry_config()).load_existing()
        registry.record_keys(existing)

    result = generate_keys(key_specs, args.priv_outfile, pub_outfile, registry, provider)
    log = logging.getLogger("prc_keygen.cli")
    for path in result.private_paths:
        log.info("Signing program source: %s", path, extra={"path": path})
    log.info("Public key table: %s", result.public_path, extra={"path": result.public_path})
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    log = get_logger("prc_keygen", level=settings.log_level, to_file=settings.log_file)
    try:
        return run(sys.argv[1:] if argv is None else argv, settings)
    except CryptoProviderError as e:
        log.error("Error occurred in SSL routines: %s", e)
        for msg in e.messages:
            log.error(msg)
        return 1
    except PrcKeyError as e:
        log.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
