# asyncontract/config/schema.py
"""
Pydantic schemas for asyncontract.yaml.

    server:                      # producer task
      module: shop.contracts
      patterns:
        - shop.contracts.events.**
        - pattern: shop.contracts.commands.*
          kind: command
    client:                      # consumer task
      documents: [specs/shop.yaml]
      references: [shop.shared]
      class_style: value

Unknown keys are rejected so typos fail loudly.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from asyncontract.client.settings import ContractGeneratorSettings
from asyncontract.document.io import DocumentFormat
from asyncontract.server.discovery import DiscoveryPattern, MessageKind, parse_pattern


class PatternConfig(BaseModel):
    pattern: str
    kind: MessageKind = MessageKind.EVENT

    model_config = ConfigDict(extra="forbid")

    @field_validator("kind", mode="before")
    @classmethod
    def parse_kind(cls, v: Any) -> MessageKind:
        return v if isinstance(v, MessageKind) else MessageKind.parse(str(v))

    def to_pattern(self) -> DiscoveryPattern:
        return DiscoveryPattern(pattern=self.pattern, kind=self.kind)


class ServerConfig(BaseModel):
    module: Optional[str] = Field(default=None, description="Importable producer module")
    catalog: Optional[str] = Field(default=None, description="Static catalog file")
    patterns: List[PatternConfig] = Field(default_factory=list)
    title: Optional[str] = None
    version: str = "1.0.0"
    output: Optional[str] = None
    format: DocumentFormat = DocumentFormat.YAML

    model_config = ConfigDict(extra="forbid")

    @field_validator("patterns", mode="before")
    @classmethod
    def expand_shorthand(cls, v: Any) -> Any:
        """Accept "PATTERN[=KIND]" strings next to mappings."""
        if not isinstance(v, list):
            return v
        out = []
        for item in v:
            if isinstance(item, str):
                parsed = parse_pattern(item)
                out.append({"pattern": parsed.pattern, "kind": parsed.kind})
            else:
                out.append(item)
        return out

    def discovery_patterns(self) -> List[DiscoveryPattern]:
        return [p.to_pattern() for p in self.patterns]


class ClientConfig(ContractGeneratorSettings):
    documents: List[str] = Field(default_factory=list)
    references: List[str] = Field(default_factory=list)
    output_dir: str = "generated"

    def generator_settings(self) -> ContractGeneratorSettings:
        return ContractGeneratorSettings.model_validate(
            self.model_dump(include=set(ContractGeneratorSettings.model_fields))
        )


class ProjectConfig(BaseModel):
    server: ServerConfig = Field(default_factory=ServerConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)

    model_config = ConfigDict(extra="forbid")


__all__ = ["PatternConfig", "ServerConfig", "ClientConfig", "ProjectConfig"]
