from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ProjectRules(BaseModel):
    slug: str = "safecalc"
    rules_version: str = "1"


class LoggingRules(BaseModel):
    level: LogLevel = "INFO"
    format: str = "%(levelname)s %(name)s: %(message)s"


class PromptRules(BaseModel):
    max_attempts: int = Field(default=3, ge=1)


class ApiRules(BaseModel):
    title: str = "safecalc API"
    cors_origins: list[str] = Field(default_factory=list)


class Rules(BaseModel):
    project: ProjectRules = Field(default_factory=ProjectRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
    prompt: PromptRules = Field(default_factory=PromptRules)
    api: ApiRules = Field(default_factory=ApiRules)
