#!/usr/bin/env python3
"""
Monster Navigator

Thin entry point; the game lives in the monsternav package:
- battle: combatants, attack resolution, turn state machine
- world: grid overworld and encounter rolls
- game: mode switching and presentation pacing
- ui: rich rendering and key input

To run: python main.py
"""

from monsternav.cli import run

if __name__ == "__main__":
    run()
