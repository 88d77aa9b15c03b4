# app/agents/workflow.py
import logging
from datetime import date
from typing import List

import httpx
from pydantic import ValidationError

from app.agents.errors import ExtractionFailure, ParseFailure
from app.agents.extraction import extract_json
from app.agents.llm.base import LLMClient
from app.agents.llm.client import call_provider
from app.agents.schemas import Credential, Roadmap, SearchSnippet, Stage, Tips
from app.agents.search import search_web

logger = logging.getLogger(__name__)


def format_search_context(snippets: List[SearchSnippet]) -> str:
    return "\n\n---\n\n".join(
        f"Title: {s.title}\nContent: {s.content}\nURL: {s.url}" for s in snippets
    )


def build_roadmap_prompt(goal: str, snippets: List[SearchSnippet], year: int | None = None) -> str:
    year = year or date.today().year
    return f"""
You are a Career Roadmap Generator AI. Based on the provided web search results and your knowledge, create a comprehensive career roadmap for: "{goal}".

Web Search Context:
{format_search_context(snippets)}

Please structure your response as a JSON object with this exact format:
{{
  "goal": "{goal}",
  "overview": "A concise description of the career and its current market relevance (2-3 sentences)",
  "prerequisites": ["List 3-5 specific background requirements or foundational skills"],
  "stages": [
    {{
      "title": "Foundation (Months 1-X)",
      "skills": ["Specific technical/soft skills for this stage"],
      "resources": ["Actual course names, certifications, or learning platforms"]
    }},
    {{
      "title": "Intermediate (Months X-Y)",
      "skills": ["More advanced skills"],
      "resources": ["Specific intermediate resources and certifications"]
    }},
    {{
      "title": "Advanced (Months Y-Z)",
      "skills": ["Expert-level skills and specializations"],
      "resources": ["Advanced certifications, degree requirements"]
    }},
    {{
      "title": "Professional (Month Z+)",
      "skills": ["Industry networking and career advancement"],
      "resources": ["Professional networking, job search strategies"]
    }}
  ],
  "timeline": "Realistic timeline estimate (e.g., '18-24 months for entry-level proficiency')",
  "tips": {{
    "certifications": ["List 3-5 ACTUAL certification names that are valuable for this career"],
    "communities": ["List 3-5 REAL professional communities, associations, or forums"],
    "trends": ["List 3-5 current industry trends affecting this career in {year}"]
  }}
}}

Requirements:
- Use REAL, SPECIFIC information (actual certification names, real courses, existing communities)
- Base recommendations on current {year} industry standards
- Include specific degree requirements if applicable
- Mention actual companies hiring for this role
- Provide realistic salary expectations if relevant
- Focus on actionable, current information
- Keep the overview concise

Respond ONLY with the JSON object, no additional text.
""".strip()


def parse_roadmap(text: str) -> Roadmap:
    """
    Recover a Roadmap from raw model output.
    extract_json already prefers the greedy match when it parses and falls
    back to the balanced region otherwise.
    """
    candidate = extract_json(text)
    if candidate is None:
        raise ExtractionFailure("No valid JSON found in response")

    try:
        return Roadmap.model_validate_json(candidate)
    except ValidationError as e:
        logger.debug("Attempted to parse: %s", candidate)
        raise ParseFailure(f"Failed to parse AI response as JSON: {e}") from e


def fallback_roadmap(goal: str) -> Roadmap:
    return Roadmap(
        goal=goal,
        overview=(
            f"{goal} is a growing field with diverse opportunities. This roadmap provides "
            "a structured path based on current industry standards and requirements."
        ),
        prerequisites=[
            "Strong analytical and problem-solving skills",
            "Relevant educational background or willingness to learn",
            "Good communication and teamwork abilities",
            "Continuous learning mindset",
        ],
        stages=[
            Stage(
                title="Foundation (Months 1-6)",
                skills=["Basic industry knowledge", "Core technical skills", "Professional communication"],
                resources=["Online courses", "Industry publications", "Entry-level certifications"],
            ),
            Stage(
                title="Intermediate (Months 6-12)",
                skills=["Advanced technical skills", "Project management", "Specialized tools"],
                resources=["Professional courses", "Industry conferences", "Networking events"],
            ),
            Stage(
                title="Advanced (Months 12-18)",
                skills=["Expert-level competencies", "Leadership skills", "Strategic thinking"],
                resources=["Advanced certifications", "Mentorship programs", "Professional associations"],
            ),
            Stage(
                title="Professional (Month 18+)",
                skills=["Industry leadership", "Innovation", "Team management"],
                resources=["Senior-level roles", "Industry speaking", "Thought leadership"],
            ),
        ],
        timeline="18-24 months for career readiness, with continuous growth thereafter",
        tips=Tips(
            certifications=[
                "Industry-standard certifications",
                "Professional development courses",
                "Specialized training programs",
            ],
            communities=["Professional associations", "Online communities", "Local meetups and events"],
            trends=["Digital transformation", "Remote work adaptation", "Continuous skill development"],
        ),
    )


async def generate_roadmap(
    goal: str,
    credential: Credential,
    *,
    llm: LLMClient | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> Roadmap:
    """
    Search, prompt, one provider call, parse.
    Any failure after the search step resolves to fallback_roadmap(goal).
    """
    snippets = await search_web(goal, http_client=http_client)
    logger.info("Collected %d search snippets for %r", len(snippets), goal)

    prompt = build_roadmap_prompt(goal, snippets)

    try:
        if llm is None:
            logger.info("Making %s API call for career: %s", credential.provider.value.upper(), goal)
            raw_text = await call_provider(prompt, credential, http_client=http_client)
        else:
            logger.info("Making %s API call for career: %s", llm.name.upper(), goal)
            raw_text = await llm.generate_text(prompt)
        logger.debug("Generated text: %s", raw_text)
        return parse_roadmap(raw_text)
    except Exception as e:
        logger.warning("AI generation failed, using fallback roadmap: %s", e)
        return fallback_roadmap(goal)


async def generate_career_roadmap(goal: str, credential: Credential) -> Roadmap:
    return await generate_roadmap(goal, credential)
