from pydantic import BaseModel


class PingResponse(BaseModel):
    ping: str


class HealthResponse(BaseModel):
    status: str
    documents: list[str]
