"""
Public application facade for scorable dispatch.

Wires configuration, pattern compilation and candidate grouping together and
runs the prepare -> score -> commit cycle for each incoming message.
"""
import asyncio
import inspect
import logging
from typing import Any, Callable, Iterable, Optional, Tuple

from .config import DispatchConfig
from .config_validator import level_number
from .dispatcher_factory import build_dispatcher
from .exceptions import DispatchTimeoutError
from .handlers import binding_sort_key, handler_candidates
from .matching import make_compiler, normalized_score
from .models import Message
from .resolution import BindingScope
from .schemas import DispatchOutcome
from .scorables import Scorable


logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Apply the configured level to the package logger."""
    logging.getLogger("scorable_dispatch").setLevel(level_number(level))


class RegexDispatchApp:
    """
    Public application facade for regex dispatch.
    
    The dispatcher is built once from the candidates; every call to
    ``dispatch`` prepares it against a fresh scope holding the message.
    
    Usage:
        app = RegexDispatchApp.from_handlers(config, WeatherHandlers())
        outcome = await app.dispatch("weather in Paris")
        if outcome.matched:
            print(outcome.result)
    """
    
    def __init__(
        self,
        config: Optional[DispatchConfig] = None,
        candidates: Iterable[Tuple[str, Scorable]] = (),
        handler_key: Callable[[Any], Any] = binding_sort_key,
    ):
        """
        Initialize the application facade.
        
        :param config: DispatchConfig instance (defaults apply when None)
        :param candidates: (pattern source, inner scorable) pairs
        :param handler_key: Sort key over inner scores among scorables sharing a pattern;
            the default ranks the Binding scores of HandlerScorable candidates
        """
        self._config = config or DispatchConfig()
        configure_logging(self._config.log_level)
        self._dispatcher = build_dispatcher(
            candidates,
            compiler=make_compiler(self._config.pattern_flags),
            handler_key=handler_key,
        )
    
    @classmethod
    def from_handlers(cls, config: Optional[DispatchConfig], *targets: Any) -> "RegexDispatchApp":
        """
        Build an app from ``regex_pattern``-decorated functions or handler objects.
        """
        return cls(config, handler_candidates(*targets))
    
    @property
    def dispatcher(self) -> Scorable:
        return self._dispatcher
    
    async def dispatch(self, text: Optional[str], *values: Any, **named: Any) -> DispatchOutcome:
        """
        Dispatch one message to the best matching handler.
        
        :param text: Message text
        :param values: Extra values handlers may resolve by type
        :param named: Extra values handlers may resolve by parameter name
        :return: DispatchOutcome (``matched`` is False when nothing claimed the text)
        :raises: DispatchTimeoutError if preparation exceeds the configured timeout
        """
        scope = BindingScope(Message(text), *values, named=named)
        
        try:
            state = await asyncio.wait_for(
                self._dispatcher.prepare(scope),
                timeout=self._config.prepare_timeout,
            )
        except asyncio.TimeoutError:
            raise DispatchTimeoutError(
                f"Preparation exceeded {self._config.prepare_timeout}s for {text!r}"
            ) from None
        
        if state is None:
            logger.info(f"No pattern claimed message: {text!r}")
            return DispatchOutcome(text=text, matched=False)
        
        match = self._dispatcher.score(state)
        source = state.winner.pattern.source
        score = normalized_score(match) if match.length else None
        
        result = self._dispatcher.commit(state)
        if inspect.isawaitable(result):
            result = await result
        
        logger.info(f"Dispatched {text!r} via pattern {source!r}")
        return DispatchOutcome(
            text=text,
            matched=True,
            pattern=source,
            match=match,
            score=score,
            result=result,
        )
