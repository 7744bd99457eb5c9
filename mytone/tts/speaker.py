"""Speech dispatch: turn text and control values into finalized engine requests.

Responsibilities:
- Compose and clamp utterance parameters before they reach the engine.
- Pick an engine voice for the language hint.
- Wrap dispatch with stage telemetry and pass engine failures through.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..emotion.blend import blend
from ..emotion.classifier import classify
from ..emotion.compositor import compose
from ..errors import StageError
from ..models.datatypes import DEFAULT_EMOTION, BlendConfig, SpeechRequest
from ..telemetry.logger import RunLogger
from ..telemetry.stages import run_stage
from ..parsing import coerce_number
from ..text.templates import preview_text
from .engine import SpeechEngine
from .voices import VoiceInfo, select_voice


DEFAULT_LANGUAGE = "en-US"
DEFAULT_PREVIEW_CHARS = 120
BLEND_PREVIEW_TEXT = "This is your blended voice preview."


class Speaker:
    """Build speech requests and hand them to an injected speech engine."""

    def __init__(
        self,
        engine: SpeechEngine,
        voices: Sequence[VoiceInfo] = (),
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize the speaker with an engine and the voices it advertises."""

        self._engine = engine
        self._voices = tuple(voices)
        self._run_logger = run_logger

    def build_request(
        self,
        text: str,
        tone: float | str | None = 1.0,
        rate: float | str | None = 1.0,
        emotion: str = DEFAULT_EMOTION,
        language: str = DEFAULT_LANGUAGE,
    ) -> SpeechRequest:
        """Return a finalized request for `text` without dispatching it.

        `tone` and `rate` may be raw control values; missing or non-numeric
        values become `1.0`.

        Raises:
            StageError: If `text` is blank.
        """

        if not text or not text.strip():
            raise StageError(
                stage="speak",
                detail="Please enter text to speak.",
                hint="Pass non-empty text or pick a template.",
            )
        parameters = compose(coerce_number(tone), coerce_number(rate), emotion)
        voice = select_voice(self._voices, language)
        return SpeechRequest(
            text=text,
            pitch=parameters.pitch,
            rate=parameters.rate,
            volume=parameters.volume,
            language=language,
            voice=voice.name if voice is not None else None,
            emotion=emotion,
        )

    def speak(
        self,
        text: str,
        tone: float | str | None = 1.0,
        rate: float | str | None = 1.0,
        emotion: str = DEFAULT_EMOTION,
        language: str = DEFAULT_LANGUAGE,
    ) -> SpeechRequest:
        """Cancel in-flight speech, dispatch a new request, and return it."""

        request = self.build_request(text, tone=tone, rate=rate, emotion=emotion, language=language)
        return self._dispatch(request)

    def speak_auto(
        self,
        text: str,
        tone: float | str | None = 1.0,
        rate: float | str | None = 1.0,
        emotion: str | None = None,
        language: str = DEFAULT_LANGUAGE,
    ) -> SpeechRequest:
        """Speak `text`, using the detected emotion when none is selected."""

        chosen = emotion if emotion is not None else classify(text)
        return self.speak(text, tone=tone, rate=rate, emotion=chosen, language=language)

    def preview(
        self,
        text: str,
        tone: float | str | None = 1.0,
        rate: float | str | None = 1.0,
        emotion: str = DEFAULT_EMOTION,
        language: str = DEFAULT_LANGUAGE,
        limit: int = DEFAULT_PREVIEW_CHARS,
    ) -> SpeechRequest:
        """Speak only the first `limit` characters of `text`."""

        return self.speak(
            preview_text(text, limit),
            tone=tone,
            rate=rate,
            emotion=emotion,
            language=language,
        )

    def audition_blend(
        self,
        text: str,
        config: BlendConfig,
        language: str = DEFAULT_LANGUAGE,
    ) -> SpeechRequest:
        """Speak `text` with blended parameters; blank text uses a stock sentence."""

        parameters = blend(config).to_parameters()
        spoken = text if text and text.strip() else BLEND_PREVIEW_TEXT
        return self.speak(
            spoken,
            tone=parameters.pitch,
            rate=parameters.rate,
            emotion=DEFAULT_EMOTION,
            language=language,
        )

    def stop(self) -> None:
        """Stop any in-flight speech."""

        self._engine.cancel()

    def _dispatch(self, request: SpeechRequest) -> SpeechRequest:
        """Send one request to the engine under `speak` stage telemetry."""

        def _send() -> SpeechRequest:
            self._engine.cancel()
            self._engine.speak(request)
            if self._run_logger is not None:
                self._run_logger.log_speech_request(request)
            return request

        return run_stage(self._run_logger, "speak", _send)
