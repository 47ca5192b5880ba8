"""Activity data models and the fixed action catalog"""

from datetime import datetime
from enum import Enum
from typing import Dict, NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..utils.timeutils import as_local, local_now


class ActionType(str, Enum):
    """Eco-friendly action types"""
    RECYCLE = "recycle"
    BIKE = "bike"
    PUBLIC_TRANSPORT = "public_transport"
    REUSABLE_BAG = "reusable_bag"
    PLANT_TREE = "plant_tree"
    SAVE_ENERGY = "save_energy"


class ActionSpec(NamedTuple):
    label: str
    icon: str
    points: int


ACTION_CATALOG: Dict[ActionType, ActionSpec] = {
    ActionType.RECYCLE: ActionSpec("Recycle", "♻️", 10),
    ActionType.BIKE: ActionSpec("Bike", "🚲", 15),
    ActionType.PUBLIC_TRANSPORT: ActionSpec("Public Transport", "🚌", 10),
    ActionType.REUSABLE_BAG: ActionSpec("Reusable Bag", "🛍️", 5),
    ActionType.PLANT_TREE: ActionSpec("Plant a Tree", "🌳", 25),
    ActionType.SAVE_ENERGY: ActionSpec("Save Energy", "💡", 5),
}


class Activity(BaseModel):
    """A single logged action. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    action: ActionType
    label: str
    icon: str
    points: int = Field(gt=0)
    timestamp: datetime = Field(default_factory=local_now)

    @field_validator("timestamp")
    @classmethod
    def _localize_timestamp(cls, value: datetime) -> datetime:
        return as_local(value)

    @model_validator(mode="after")
    def _check_catalog(self) -> "Activity":
        spec = ACTION_CATALOG[self.action]
        if (self.label, self.icon, self.points) != tuple(spec):
            raise ValueError(
                f"Activity '{self.action.value}' must be labelled {spec.label!r} "
                f"with icon {spec.icon!r} and worth {spec.points} points"
            )
        return self

    @classmethod
    def for_action(
        cls, action: Union[ActionType, str], timestamp: Optional[datetime] = None
    ) -> "Activity":
        """Build the catalog activity for an action type (or its string value)"""
        action = ActionType(action)
        spec = ACTION_CATALOG[action]
        return cls(
            action=action,
            label=spec.label,
            icon=spec.icon,
            points=spec.points,
            timestamp=timestamp if timestamp is not None else local_now(),
        )

    def to_record(self) -> dict:
        return self.model_dump(mode="json")
