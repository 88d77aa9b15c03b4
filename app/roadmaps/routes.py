# Roadmap pages
import logging
from pathlib import Path

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, ConfigDict, Field

from app.settings import settings
from app.agents.schemas import Credential, Provider, Roadmap
from app.agents.workflow import generate_career_roadmap

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")
router = APIRouter()


class RoadmapRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    goal: str = Field(min_length=1, max_length=200)
    api_key: str = Field(min_length=1)
    provider: Provider = Field(default_factory=lambda: settings.default_provider)


@router.post("/roadmaps", response_class=HTMLResponse)
async def create_roadmap(
    request: Request,
    goal: str = Form(""),
    api_key: str = Form(""),
    provider: Provider | None = Form(None),
):
    provider = provider or settings.default_provider
    goal = goal.strip()
    api_key = api_key.strip()

    error = None
    if not goal:
        error = "Please enter the career you want to explore"
    elif not api_key:
        error = "An API key is required to generate a roadmap"

    if error:
        return templates.TemplateResponse(request, "home.html", {
            "providers": list(Provider),
            "provider": provider.value,
            "goal": goal,
            "error": error,
        }, status_code=400)

    logger.info("Roadmap requested for %r via %s", goal, provider.value)
    roadmap = await generate_career_roadmap(goal, Credential(secret=api_key, provider=provider))
    return templates.TemplateResponse(request, "roadmap.html", {"roadmap": roadmap})


@router.post("/api/roadmaps", response_model=Roadmap)
async def create_roadmap_json(body: RoadmapRequest) -> Roadmap:
    credential = Credential(secret=body.api_key, provider=body.provider)
    return await generate_career_roadmap(body.goal, credential)
