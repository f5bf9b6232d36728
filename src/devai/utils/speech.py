import logging
import re
import subprocess

from devai.errors import SpeechFailed

logger = logging.getLogger(__name__)

DEFAULT_VOICE = "Microsoft Zira Desktop"


def sanitize(text: str) -> str:
    """Make text safe to embed in a single-quoted PowerShell string."""
    text = text.replace("'", "''")
    text = re.sub(r"[\r\n]+", " ", text)
    return re.sub(r"[^\w\s.,!?;:'-]", "", text)


def build_command(text: str, voice: str = DEFAULT_VOICE, rate: int = -2) -> list[str]:
    script = (
        "Add-Type -AssemblyName System.Speech; "
        "$speak = New-Object System.Speech.Synthesis.SpeechSynthesizer; "
        f"$speak.SelectVoice('{sanitize(voice)}'); "
        f"$speak.Rate = {int(rate)}; "
        f"$speak.Speak('{sanitize(text)}')"
    )
    return ["powershell", "-NoProfile", "-Command", script]


def speak(text: str, voice: str = DEFAULT_VOICE, rate: int = -2) -> None:
    """
    Read text aloud with the Windows speech synthesizer.

    Parameters
    ----------
    text : str
        Text to speak.
    voice : str, optional
        Installed voice name.
    rate : int, optional
        Speech rate from -10 (slowest) to 10 (fastest).
    """
    command = build_command(text, voice, rate)
    logger.debug("Running speech synthesizer with voice=%s rate=%s", voice, rate)
    try:
        subprocess.run(command, check=True, capture_output=True)
    except FileNotFoundError as exc:
        raise SpeechFailed("PowerShell is not available on this system") from exc
    except subprocess.CalledProcessError as exc:
        stderr = (exc.stderr or b"").decode(errors="replace").strip()
        raise SpeechFailed(f"Speech synthesizer failed: {stderr or exc}") from exc
