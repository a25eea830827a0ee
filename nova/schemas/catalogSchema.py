from typing import List
from pydantic import BaseModel


class Feature(BaseModel):
    icon: str
    title: str
    description: str

    class Config:
        frozen = True


class Spec(BaseModel):
    category: str
    items: List[str]

    class Config:
        frozen = True
