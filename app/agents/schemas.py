## Pydantic Schemas for Structured Output
from enum import Enum
from typing import List

from pydantic import BaseModel


class Provider(str, Enum):
    GEMINI = "gemini"
    OPENAI = "openai"


class Credential(BaseModel):
    secret: str
    provider: Provider


class SearchSnippet(BaseModel):
    title: str
    content: str
    url: str


class Stage(BaseModel):
    title: str
    skills: List[str]
    resources: List[str]


class Tips(BaseModel):
    certifications: List[str]
    communities: List[str]
    trends: List[str]


class Roadmap(BaseModel):
    goal: str
    overview: str
    prerequisites: List[str]
    stages: List[Stage]
    timeline: str
    tips: Tips
