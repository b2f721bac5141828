from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Animal:
    catalog_number: str
    name: str
    breed: str
    type: str
    age: int
    gender: str
    is_healthy: bool = True

    def describe(self) -> str:
        health = "healthy" if self.is_healthy else "not healthy"
        return (
            f"{self.catalog_number} | {self.name} | {self.breed} | {self.type} | "
            f"{self.age} | {self.gender} | {health}"
        )
