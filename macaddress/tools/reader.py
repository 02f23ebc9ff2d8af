import logging

from macaddress.address import MacAddress
from macaddress.codec import ParseError
from macaddress.log import LoggingMixin
from macaddress.metrics import MetricsMixin


class AddressReader(LoggingMixin, MetricsMixin):
    """
    Parses addresses typed in by users, keeping count of what was accepted
    and what was rejected
    """
    def __init__(self, logger: logging.Logger = None):
        LoggingMixin.__init__(self, logger)

    def read(self, text: str) -> MacAddress:
        try:
            with self.timer("parse").time():
                mac = MacAddress.parse(text)
        except ParseError as e:
            self.counter("errors", type(e).__name__).inc()
            self.debug(f"Rejected {text!r}: {e!r}")
            raise
        self.meter("parsed").mark()
        self.debug(f"Parsed {text!r} as {mac!r}")
        return mac

    def stats(self):
        return {name: values.get("count") for name, values in self.metrics().items()}
