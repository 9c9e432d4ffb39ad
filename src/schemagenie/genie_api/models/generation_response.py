from pydantic import BaseModel, Field
from typing import Optional


class GenerationResponse(BaseModel):
    """Model for schema generation responses."""
    schema_text: str = Field(..., alias="schema", description="Generated schema")
    erd_image_url: Optional[str] = Field(
        None, alias="erdImageUrl", description="Base64 data URI of Mermaid ER diagram source"
    )
    api_routes: Optional[str] = Field(None, alias="apiRoutes", description="Suggested API routes")
    explanation: Optional[str] = Field(None, description="Rationale for the schema design")

    class Config:
        populate_by_name = True
