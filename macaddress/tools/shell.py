import argparse
import logging
import sys
from typing import Optional

import cmd2
import hexdump
from cmd2 import Cmd2ArgumentParser, with_argparser

from macaddress.address import MacAddress
from macaddress.codec import MacAddressFormat, ParseError
from macaddress.tools.reader import AddressReader


parse_parser = Cmd2ArgumentParser(description="Parse an address and print it in every notation")
parse_parser.add_argument("address", help="Address in any supported notation")

format_parser = Cmd2ArgumentParser(description="Print an address in one notation")
format_parser.add_argument("address", help="Address in any supported notation")
format_parser.add_argument("notation", choices=[f.name.lower() for f in MacAddressFormat],
                           help="Notation to print")

info_parser = Cmd2ArgumentParser(description="Show the flag bits of an address")
info_parser.add_argument("address", help="Address in any supported notation")

dump_parser = Cmd2ArgumentParser(description="Hexdump the octets of an address")
dump_parser.add_argument("address", help="Address in any supported notation")


class MacAddressShell(cmd2.Cmd):
    intro = "Welcome to the MAC address shell. Type help or ? to list commands.\n"
    prompt = "(mac) "

    def __init__(self, *args, **kwargs):
        cmd2.Cmd.__init__(self, *args, **kwargs)
        self.reader = AddressReader(logging.getLogger("macaddress.shell"))
        self.hidden_commands.extend(["alias", "edit", "shortcuts", "history", "macro", "set",
                                     "shell", "py", "ipy", "run_script", "run_pyscript"])

    def _parse(self, text: str) -> Optional[MacAddress]:
        try:
            return self.reader.read(text)
        except ParseError as e:
            self.perror(f"Cannot parse {text}: {e}")
            return None

    @with_argparser(parse_parser)
    def do_parse(self, args):
        mac = self._parse(args.address)
        if mac is None:
            return
        for fmt in MacAddressFormat:
            self.poutput(f"{fmt.name: <12} {mac.to_string(fmt)}")

    @with_argparser(format_parser)
    def do_format(self, args):
        mac = self._parse(args.address)
        if mac is None:
            return
        self.poutput(mac.to_string(MacAddressFormat.from_name(args.notation)))

    @with_argparser(info_parser)
    def do_info(self, args):
        mac = self._parse(args.address)
        if mac is None:
            return
        self.poutput(f"address={mac} nil={mac.is_nil()} broadcast={mac.is_broadcast()} "
                     f"multicast={mac.is_multicast()} local={mac.is_local()}")
        self.poutput(f"{'multicast' if mac.is_multicast() else 'unicast'}, "
                     f"{'locally' if mac.is_local() else 'universally'} administered")

    @with_argparser(dump_parser)
    def do_dump(self, args):
        mac = self._parse(args.address)
        if mac is None:
            return
        self.poutput(hexdump.hexdump(bytes(mac), result="return"))

    def do_stats(self, *args):
        """Display parse counts and failures"""
        for name, count in sorted(self.reader.stats().items()):
            self.poutput(f"{name} count={count}")

    def do_bye(self, *args):
        """Close this shell"""
        self.poutput("Bye!")
        return True


def main():
    parser = argparse.ArgumentParser(description='Interactive shell for parsing and formatting MAC addresses')
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(stream=sys.stderr, level=logging.ERROR)
    if args.verbose:
        logging.getLogger("macaddress").setLevel(logging.DEBUG)

    shell = MacAddressShell(allow_cli_args=False)
    sys.exit(shell.cmdloop())
