#!/usr/bin/env python3
"""
List the models available to your API key.
"""

from groqapi import Groq, ModelList


def main():
    with Groq() as client:
        models = ModelList.model_validate(client.models.list())

        print("Available Models:")
        for model in models.data:
            print(f" - {model.id}")


if __name__ == "__main__":
    main()
