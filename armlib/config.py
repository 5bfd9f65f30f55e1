import os
from pathlib import Path
from typing import Dict, Any, List, Optional, Type, Union, Iterable

import yaml
from attrs import fields

from armlib.json import from_json, to_json
from armlib.logger import log
from armlib.types import Json
from armlib.utils import replace_env_vars


class ConfigNotFoundError(AttributeError):
    pass


class RunningConfig:
    def __init__(self) -> None:
        """Initialize the global config."""
        self.data: Dict[str, Any] = {}
        self.classes: Dict[str, type] = {}

    def apply(self, other: "RunningConfig") -> None:
        """Apply another config to this one.

        Only updates references, does not create a copy of the data.
        """
        if isinstance(other, RunningConfig):
            self.data = other.data
            self.classes = other.classes
        else:
            raise TypeError(f"Cannot apply {type(other)} to RunningConfig")


_config = RunningConfig()


class MetaConfig(type):
    def __getattr__(cls, name: str) -> Any:
        if name in _config.data:
            return _config.data[name]
        elif name in _config.classes:
            # sections that were never loaded use their defaults
            _config.data[name] = _config.classes[name]()
            return _config.data[name]
        else:
            raise ConfigNotFoundError(f"No such config {name}")


class Config(metaclass=MetaConfig):
    running_config: RunningConfig = _config

    @staticmethod
    def init_default_config() -> None:
        for config_id, config_data in Config.running_config.classes.items():
            if config_id not in Config.running_config.data:
                log.debug(f"Initializing defaults for config section {config_id}")
                Config.running_config.data[config_id] = config_data()

    @staticmethod
    def add_config(config: object) -> None:
        """Add a config to the config manager.

        Takes an attrs class as input and adds it to the config store.
        The class must have a kind ClassVar which specifies the top level config name.
        """
        if hasattr(config, "kind"):
            Config.running_config.classes[config.kind] = config  # type: ignore
        else:
            raise RuntimeError("Config must have a 'kind' attribute")

    @staticmethod
    def read_config(config: Json, reason: Optional[str] = None) -> Dict[str, Any]:
        new_config = {}
        for config_id, config_data in config.items():
            if config_data is None:
                config_data = {}
            if config_id in Config.running_config.classes:
                message = f" reason: {reason}" if reason else ""
                log.debug(f"Loading config section {config_id}" + message)
                clazz: Type[Any] = Config.running_config.classes[config_id]
                new_config[config_id] = from_json(config_data, clazz)
            else:
                raise ConfigNotFoundError(f"Unknown config section {config_id}")
        return new_config

    @staticmethod
    def load(config: Json) -> None:
        """
        Load the given config sections.
        All `$(NAME)` references are resolved from the environment before the sections are read.
        Sections not mentioned in the config keep their current value.
        """
        resolved = {k: replace_env_vars(v, os.environ, keep_unresolved=False) for k, v in config.items()}
        Config.running_config.data.update(Config.read_config(resolved, reason="load"))

    @staticmethod
    def load_file(path: Union[str, Path]) -> None:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
        if content is None:
            return
        if not isinstance(content, dict):
            raise ValueError(f"Config file {path} needs to define a dictionary of config sections.")
        log.info(f"Loading config from {path}")
        Config.load(content)

    @staticmethod
    def override_config(overrides: Iterable[str]) -> None:
        """
        Override single values with `section.key=value` definitions.
        """
        for override in overrides:
            if "=" not in override:
                log.error(f"Invalid config override {override}")
                continue
            config_key, config_value = override.split("=", 1)
            config_keys = config_key.split(".")
            if len(config_keys) != 2:
                log.error(f"Invalid config override {config_key}")
                continue
            section, key = config_keys
            config_part = getattr(Config, section)
            attribute = next((a for a in fields(type(config_part)) if a.name == key), None)
            if attribute is None:
                log.error(f"Override key {config_key} is unknown - skipping")
                continue
            log.debug(f"Overriding config key {config_key}")
            setattr(config_part, key, Config.cast_target_type(config_value, getattr(config_part, key)))

    @staticmethod
    def cast_target_type(config_value: str, current_value: Any) -> object:
        target_type = type(current_value)
        if current_value is None or target_type is str:
            return config_value
        elif target_type is bool:
            return config_value.lower() in ("true", "yes", "1")
        elif target_type in (list, tuple, set):
            return target_type(config_value.split(","))
        else:
            return target_type(config_value)

    @staticmethod
    def reset() -> None:
        Config.running_config.data = {}

    @staticmethod
    def dict() -> Json:
        return to_json(Config.running_config.data)

    @staticmethod
    def kinds() -> List[str]:
        return sorted(Config.running_config.classes)


# Note: the config is mutable.
def current_config() -> Config:
    # metaclass makes it possible to use the class as instance.
    # use this accessor here to get a typed instance of the config
    return Config  # type: ignore
