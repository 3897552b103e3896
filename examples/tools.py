#!/usr/bin/env python3
"""
Tool calling example using the groqapi SDK.

The model may ask for either tool; the SDK runs it locally and sends the
result back for a final answer.
"""

import json
from datetime import datetime

from groqapi import Groq, Tool


def get_current_time(arguments: str) -> str:
    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    return json.dumps({"datetime": now, "timezone": "System default"})


def get_weather(arguments: str) -> str:
    location = json.loads(arguments).get("location", "unknown")
    # Canned data; a real tool would call a weather service
    return json.dumps({"location": location, "temperature": 22, "unit": "celsius", "condition": "sunny"})


TOOLS = [
    Tool.from_function(
        name="get_current_time",
        description="Get the current date and time",
        execute=get_current_time,
    ),
    Tool.from_function(
        name="get_weather",
        description="Get the current weather for a location",
        parameters={
            "type": "object",
            "properties": {
                "location": {"type": "string", "description": "City name, e.g. Lisbon"},
            },
            "required": ["location"],
        },
        execute=get_weather,
    ),
]


def main():
    with Groq() as client:
        print("Tools Example")
        print("=" * 50)

        for question in ["What time is it now?", "What's the weather like in Lisbon?"]:
            answer = client.tools.run_conversation(
                user_prompt=question,
                tools=TOOLS,
                model="llama-3.3-70b-versatile",
                system_message="You are a helpful assistant. Use the tools when they help.",
            )
            print(f"\nQ: {question}\nA: {answer}")


if __name__ == "__main__":
    main()
