# worldbridge/models/base.py
# Base models about the basic concepts of the build engine: positions, regions, fill plans and outcomes

from pydantic import BaseModel, Field
from typing import List, Dict, Any, Optional, Tuple
from enum import Enum

# =============================================================================
# Basic Data Types
# =============================================================================

class Position(BaseModel):
    """3D lattice position model"""
    x: int
    y: int
    z: int

    def to_tuple(self) -> Tuple[int, int, int]:
        """Convert to tuple"""
        return (self.x, self.y, self.z)

    def to_dict(self) -> Dict[str, int]:
        """Convert to plain {x, y, z} dict for outcome payloads"""
        return {"x": self.x, "y": self.y, "z": self.z}

    def to_compact_str(self) -> str:
        """Convert to compact string format (x,y,z)"""
        return f"({self.x},{self.y},{self.z})"


class Region(BaseModel):
    """Axis-aligned inclusive box between two corners.

    Corners are kept in the order they were given. Anything that needs the
    lower/upper corner derives it through min_corner()/max_corner().
    """
    start: Position = Field(..., description="First corner (x1, y1, z1)")
    end: Position = Field(..., description="Second corner (x2, y2, z2)")

    @classmethod
    def from_coords(cls, x1: int, y1: int, z1: int, x2: int, y2: int, z2: int) -> 'Region':
        return cls(start=Position(x=x1, y=y1, z=z1), end=Position(x=x2, y=y2, z=z2))

    def min_corner(self) -> Position:
        return Position(
            x=min(self.start.x, self.end.x),
            y=min(self.start.y, self.end.y),
            z=min(self.start.z, self.end.z),
        )

    def max_corner(self) -> Position:
        return Position(
            x=max(self.start.x, self.end.x),
            y=max(self.start.y, self.end.y),
            z=max(self.start.z, self.end.z),
        )

    def positions(self):
        """Iterate every lattice position inside the region"""
        low, high = self.min_corner(), self.max_corner()
        for x in range(low.x, high.x + 1):
            for y in range(low.y, high.y + 1):
                for z in range(low.z, high.z + 1):
                    yield (x, y, z)

    def to_description(self) -> str:
        return f"{self.start.to_compact_str()} to {self.end.to_compact_str()}"

# =============================================================================
# Fill Planning Models
# =============================================================================

class FillRole(str, Enum):
    """What a fill operation contributes to the net placed-block count"""
    PLACE = "place"    # counts towards placed blocks
    CLEAR = "clear"    # interior void, subtracted from placed blocks


class FillOperation(BaseModel):
    """A single bulk write handed to the world gateway"""
    region: Region
    block_id: str = Field(..., description="Namespaced block id, e.g. minecraft:stone")
    role: FillRole = Field(FillRole.PLACE, description="Whether the affected count is added or subtracted")


class FillPlan(BaseModel):
    """Ordered list of fill operations for one build request"""
    operations: List[FillOperation] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.operations)

# =============================================================================
# Outcome Models
# =============================================================================

class ExecutionOutcome(BaseModel):
    """Uniform result envelope returned by every tool operation and every sequence step

    Attributes:
        success (bool): Whether the operation completed
        message (str): Human-readable summary or error description
        data (Optional[Dict]): Operation-specific payload
    """
    success: bool
    message: str
    data: Optional[Dict[str, Any]] = None


class StepOutcome(ExecutionOutcome):
    """Extension of ExecutionOutcome: one recorded sequence step, with its position in the sequence"""
    index: int = Field(..., description="Zero-based position of the step in the sequence")
    step: str = Field(..., description="Step type, 'wait' or an action name")
    description: str = Field("", description="Human-readable step description")
