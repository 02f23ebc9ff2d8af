import configparser
import os
from typing import Optional, Mapping, Iterator, Any, List, Dict

from macaddress.codec import MacAddressFormat

_default_settings = {
    "format": {
        "display": "all",
        "hexdump": False
    },
    "log": {
        "log.level": "INFO"
    }
}


class Settings:
    def __init__(self, paths: List[str] = None, defaults: Dict = None):
        self._configfiles = list(paths) if paths is not None else []
        self._config: Optional[configparser.ConfigParser] = None
        if defaults is None:
            self._defaults = dict()
        else:
            self._defaults = defaults
        self.load()

    def load(self):
        self._config = configparser.ConfigParser(defaults=self._defaults,
                                                 interpolation=configparser.ExtendedInterpolation(),
                                                 inline_comment_prefixes=";",
                                                 default_section="default")
        self._config.read_dict(_default_settings)
        for path in self._configfiles:
            if os.path.exists(path):
                self._config.read(path)
            else:
                raise RuntimeError(f"No such config file {path}")

    def format_config(self):
        return FormatConfig(self._config["format"])

    def log_config(self):
        return LogConfig(self._config["log"])

    def config_section(self, name):
        return Config(name, self._config[name])


class Config(Mapping):
    def __init__(self, section_name, config_section):
        self._section = section_name
        self._config_section = config_section

    def __getitem__(self, k) -> Any:
        return self._config_section[k]

    def __len__(self) -> int:
        return len(self._config_section)

    def __iter__(self) -> Iterator:
        return iter(self._config_section)

    def __repr__(self) -> str:
        return f"{self._section}: {dict(self._config_section)}"

    def as_dict(self) -> dict:
        return dict(self._config_section)

    def get(self, key, default: str = None) -> str:
        value = self._config_section.get(key)
        if value is None:
            value = default
        if value is None:
            raise KeyError(f"Unknown key {key} in section {self._section}")
        return value

    def get_boolean(self, key, default: bool = None) -> bool:
        value = self._config_section.getboolean(key)
        if value is None:
            value = default
        if value is None:
            raise KeyError(f"Unknown key {key} in section {self._section}")
        return value


class FormatConfig(Config):
    def __init__(self, config_section):
        super().__init__("format", config_section)

    def display_formats(self) -> List[MacAddressFormat]:
        display = super().get("display")
        if display.strip().lower() == "all":
            return list(MacAddressFormat)
        return [MacAddressFormat.from_name(display)]

    def show_hexdump(self) -> bool:
        return super().get_boolean("hexdump")


class LogConfig(Config):
    def __init__(self, config_section):
        super().__init__("log", config_section)

    def config_file(self) -> Optional[str]:
        value = self._config_section.get("log.config")
        if value is None or value.strip() == "":
            return None
        return value

    def level(self) -> str:
        return super().get("log.level").upper()
