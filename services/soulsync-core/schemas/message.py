from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant", "joke"]
Emotion = Literal["sad", "neutral"]

GET_JOKE = "get_joke"


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    role: Role
    content: str


class ChatRequest(BaseModel):
    messages: Optional[list[Message]] = None
    language: str = "en-US"
    action: Optional[str] = None

    @property
    def wants_joke(self) -> bool:
        return self.action == GET_JOKE


class ChatResult(BaseModel):
    """Structured reply for the chat path.

    Internally the fields are ``reply_text`` / ``emotion``; on the wire
    they are ``responseText`` / ``detectedEmotion``.
    """

    model_config = ConfigDict(populate_by_name=True)

    reply_text: str = Field(alias="responseText")
    emotion: Emotion = Field(alias="detectedEmotion")


class JokeResponse(BaseModel):
    joke: str


class ErrorResponse(BaseModel):
    error: str


class LivenessResponse(BaseModel):
    message: str
    status: str
    timestamp: str
