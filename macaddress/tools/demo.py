import argparse
import logging
import logging.config
import sys

import hexdump

from macaddress.codec import MacAddressFormat, ParseError
from macaddress.settings import Settings
from macaddress.tools.reader import AddressReader

logger = logging.getLogger("macaddress")


def setup_logging(settings: Settings, verbose: bool):
    log_settings = settings.log_config()
    logging_config_file = log_settings.config_file()
    if logging_config_file is not None:
        logging.config.fileConfig(logging_config_file, disable_existing_loggers=False)
    else:
        logging.basicConfig(stream=sys.stderr, level=log_settings.level())

    if verbose:
        logger.setLevel(logging.DEBUG)


def run(args, out=sys.stdout) -> int:
    settings = Settings([args.config] if args.config else [])
    setup_logging(settings, args.verbose)
    format_settings = settings.format_config()

    try:
        mac = AddressReader(logging.getLogger("macaddress.demo")).read(args.address)
    except ParseError as e:
        sys.stderr.write(f"Cannot parse {args.address}: {e}\n")
        return 1

    if args.format is not None:
        formats = [MacAddressFormat.from_name(args.format)]
    else:
        formats = format_settings.display_formats()

    if len(formats) == 1:
        print(mac.to_string(formats[0]), file=out)
    else:
        for fmt in formats:
            print(f"{fmt.name: <12} {mac.to_string(fmt)}", file=out)

    if args.hexdump or format_settings.show_hexdump():
        print(hexdump.hexdump(bytes(mac), result="return"), file=out)
    return 0


def main():
    """
    Print an address in each of the supported notations
    """
    parser = argparse.ArgumentParser(description='Parse a MAC address and print it in every notation')
    parser.add_argument("address", nargs="?", default="12:34:56:ab:cd:ef", help="Address to parse")
    parser.add_argument("--format", choices=[f.name.lower() for f in MacAddressFormat],
                        help="Only print this notation, overrides the display setting")
    parser.add_argument("--config", help="Config file")
    parser.add_argument("--hexdump", action="store_true", help="Also print a hexdump of the address")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()
    sys.exit(run(args))
