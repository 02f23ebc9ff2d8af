from importlib.metadata import version, PackageNotFoundError

from macaddress.address import MacAddress
from macaddress.codec import EUI48LEN, EUI64LEN, MacAddressFormat, ParseError, InvalidLength, InvalidCharacter

try:
    __version__ = version("macaddress")
except PackageNotFoundError:
    # package is not installed
    pass
