from pydantic import BaseModel, Field
from typing import Optional

from schemagenie.shared.options import DatabaseType, InputType, OutputFormat


class GenerationOptions(BaseModel):
    """Options controlling what the generator returns."""
    output_format: OutputFormat = Field(
        OutputFormat.PRISMA, alias="outputFormat", description="Schema representation to return"
    )
    database_type: str = Field(
        DatabaseType.POSTGRESQL.value,
        alias="databaseType",
        description="Target database: postgresql, mysql, mongodb or firebase",
    )
    suggest_api: bool = Field(True, alias="suggestAPI", description="Include suggested API routes")
    generate_erd: bool = Field(True, alias="generateERD", description="Include an ER diagram")

    class Config:
        populate_by_name = True


class GenerationRequest(BaseModel):
    """Model for schema generation requests."""
    input_code: Optional[str] = Field(
        None,
        alias="inputCode",
        description="Frontend source, or the design URL for figma input",
    )
    input_type: str = Field(
        InputType.REACT.value,
        alias="inputType",
        description="Kind of input: react, html, json or figma",
    )
    options: GenerationOptions = Field(default_factory=GenerationOptions)

    class Config:
        populate_by_name = True
