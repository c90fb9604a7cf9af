#!/usr/bin/env python3
"""Freestyle Judge Hugging Face Spaces entry point."""

from freestyle_judge.app.app import main


if __name__ == "__main__":
    main()
