"""
LLM provider interface.

Question generation talks to this interface only, so tests can swap in a
fake provider without touching the network.
"""
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field

Message = Dict[str, str]


@dataclass
class LLMResponse:
    """A completion plus the usage numbers we log."""
    content: str
    tokens_in: int = 0
    tokens_out: int = 0
    model: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)


class LLMProvider(ABC):

    @abstractmethod
    def chat(
        self,
        messages: List[Message],
        model: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> LLMResponse:
        """
        Run one chat completion.

        ``json_mode`` asks the provider to return a single JSON object; the
        content is still handed back as an unparsed string.

        Raises:
            UpstreamFailureError: when the provider call fails
        """
