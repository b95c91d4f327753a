"""Runner configuration."""

from pydantic import BaseModel, Field


class RunnerConfig(BaseModel):
    """Configuration for a tasks runner.

    Example:
        >>> config = RunnerConfig(name="deploy", log_values=True)
        >>> runner = SerialTasksRunner(build, upload, config=config)
    """

    name: str = Field(
        default="serial",
        description="Label used in log messages and repr.",
        min_length=1,
    )
    log_values: bool = Field(
        default=False,
        description="Include each task's settled value in debug log messages.",
    )
