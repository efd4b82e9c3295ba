"""Central registry for agents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, Tuple

if TYPE_CHECKING:
    from connect4_engine.agents.base_agent import BaseAgent

AgentFactory = Callable[..., "BaseAgent"]

_AGENT_REGISTRY: Dict[str, Tuple[AgentFactory, Dict[str, Any]]] = {}


def register_agent(agent_id: str, ctor: AgentFactory, **default_kwargs: Any) -> None:
    """Register an agent constructor together with default parameters."""
    if agent_id in _AGENT_REGISTRY:
        raise ValueError(f"Agent id '{agent_id}' is already registered.")
    _AGENT_REGISTRY[agent_id] = (ctor, dict(default_kwargs))


def make_agent(agent_id: str, **overrides: Any) -> "BaseAgent":
    """Instantiate a registered agent; ``overrides`` replace the registered defaults."""
    ctor, defaults = get_agent_entry(agent_id)
    return ctor(**{**defaults, **overrides})


def list_agents() -> Iterable[str]:
    return tuple(_AGENT_REGISTRY.keys())


def get_agent_entry(agent_id: str) -> Tuple[AgentFactory, Dict[str, Any]]:
    """Constructor and a copy of the defaults for ``agent_id``."""
    if agent_id not in _AGENT_REGISTRY:
        raise KeyError(f"Agent id '{agent_id}' is not registered.")
    ctor, defaults = _AGENT_REGISTRY[agent_id]
    return ctor, dict(defaults)
