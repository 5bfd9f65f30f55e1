from typing import ClassVar, Optional

from attr import define, field

from armlib.config import Config
from armlib.logger import LoggingConfig


@define
class ArmModelsConfig:
    kind: ClassVar[str] = "arm_models"
    raise_on_parse_error: Optional[bool] = field(
        default=True,
        metadata={
            "description": "Raise a DeserializationError if a payload can not be parsed.\n"
            "If disabled, the error is logged and no model is returned."
        },
    )
    log_unknown_enum_values: Optional[bool] = field(
        default=False,
        metadata={"description": "Log every enum value that is not known to this version of the models."},
    )


Config.add_config(ArmModelsConfig)
Config.add_config(LoggingConfig)


def arm_models_config() -> ArmModelsConfig:
    return Config.arm_models  # type: ignore
