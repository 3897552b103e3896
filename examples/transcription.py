#!/usr/bin/env python3
"""
Audio transcription and translation example.

Usage: python transcription.py path/to/audio.m4a
"""

import sys
from pathlib import Path

from groqapi import Groq, Transcription


def main():
    audio_path = Path(sys.argv[1])

    with Groq() as client:
        with audio_path.open("rb") as f:
            transcript = client.audio.transcriptions.create(f, audio_path.name, "whisper-large-v3")
        print(f"Transcription: {Transcription.model_validate(transcript).text}")

        translation = client.audio.translations.create(
            audio_path.read_bytes(), audio_path.name, "whisper-large-v3"
        )
        print(f"Translation: {Transcription.model_validate(translation).text}")


if __name__ == "__main__":
    main()
