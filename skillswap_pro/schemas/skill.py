from pydantic import Field

from .common import SkillCategory, WireModel


class Skill(WireModel):
    id: str
    name: str = Field(..., min_length=1, max_length=100)
    category: SkillCategory = SkillCategory.PROGRAMMING
