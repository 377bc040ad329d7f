"""
Request Pipeline

Each API operation is an ordered list of steps followed by one terminal
operation:

    validators -> existence lookup -> cross-checks -> guards -> terminal

A step receives the per-request ``RequestContext``, may read and record
values on it, and signals failure by raising an ``APIError``. The first
raise ends the run: no later step and no terminal operation executes, and
the caller sees only that first error.

Usage:
    pipeline = Pipeline("dishes.create", body_has_name, ..., create)
    dish = pipeline.run(context)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from grubdash.services.ids import IdSupplier, new_id
from grubdash.services.store.base import BaseStore

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    """
    State shared by the steps of one request.

    Attributes:
        store: Collection the operation reads and mutates
        data: Change-set from the request body's ``data`` object
        params: Route parameters (e.g., {"dishId": "..."})
        new_id: Identifier supplier used by create
        entity: Record resolved by the existence lookup
        entity_id: Route identifier resolved by the existence lookup
    """
    store: BaseStore
    data: Dict[str, Any] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)
    new_id: IdSupplier = new_id
    entity: Optional[Any] = None
    entity_id: Optional[str] = None


Step = Callable[[RequestContext], Any]


class Pipeline:
    """
    Ordered, short-circuiting chain of steps.

    The last callable is the terminal operation; its return value is the
    result of ``run``. Steps before it are checks whose return values are
    ignored.
    """

    def __init__(self, name: str, *steps: Step):
        if not steps:
            raise ValueError(f"Pipeline {name} needs a terminal operation")
        self.name = name
        self.checks = steps[:-1]
        self.terminal = steps[-1]

    @property
    def steps(self) -> tuple:
        return (*self.checks, self.terminal)

    def run(self, context: RequestContext) -> Any:
        for step in self.checks:
            logger.debug(f"{self.name}: {step.__name__}")
            step(context)
        logger.debug(f"{self.name}: {self.terminal.__name__}")
        return self.terminal(context)

    def __repr__(self):
        names = " -> ".join(step.__name__ for step in self.steps)
        return f"<Pipeline {self.name}: {names}>"
