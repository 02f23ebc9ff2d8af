from pyformance import global_registry
from pyformance.meters import Meter, Counter, Timer


class MetricsMixin:
    def get_key(self, name, *extra):
        pkg = self.__class__.__module__
        clazz = self.__class__.__qualname__
        name_parts = [name]
        name_parts.extend([str(e) for e in extra])
        joined_name = ".".join(name_parts)
        return f"{pkg}.{clazz}:{joined_name}"

    def meter(self, name: str, *args) -> Meter:
        return global_registry().meter(self.get_key(name, *args))

    def counter(self, name: str, *args) -> Counter:
        return global_registry().counter(self.get_key(name, *args))

    def timer(self, name: str, *args) -> Timer:
        return global_registry().timer(self.get_key(name, *args))

    def metrics(self, prefix: str = None) -> dict:
        """Dump the registered metrics belonging to this class, keyed by metric name"""
        own = f"{self.__class__.__module__}.{self.__class__.__qualname__}:"
        dumped = {}
        for key, values in global_registry().dump_metrics().items():
            if key.startswith(own):
                name = key[len(own):]
                if prefix is None or name.startswith(prefix):
                    dumped[name] = values
        return dumped
