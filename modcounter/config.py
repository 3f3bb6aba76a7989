"""Library configuration via Pydantic Settings.

NOTE: Environment variable names are mapped explicitly (MODCOUNTER_*);
an unknown mode value in the environment fails validation at import time.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from modcounter.domain.value_objects.enums import CircularMode, NegativeStepPolicy


class Settings(BaseSettings):
    # Counter defaults
    circular_mode: CircularMode = Field(
        default=CircularMode.MULTI_WRAP,
        validation_alias="MODCOUNTER_CIRCULAR_MODE",
    )
    negative_steps: NegativeStepPolicy = Field(
        default=NegativeStepPolicy.REVERSE,
        validation_alias="MODCOUNTER_NEGATIVE_STEPS",
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
