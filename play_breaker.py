#!/usr/bin/env python3
"""
Main script to launch Brick Breaker with PyGame graphical interface
"""

import importlib.util
import sys
import traceback

try:
    from brick_breaker.gui.game_app import main

except ImportError as e:
    print(f"Import error: {e}")
    print()
    print("Checking dependencies:")
    for module, package in (("pygame", "pygame"), ("pydantic", "pydantic"), ("numpy", "numpy")):
        if importlib.util.find_spec(module) is not None:
            print(f"✓ {package} is installed")
        else:
            print(f"✗ {package} is not installed - pip install {package}")
    sys.exit(1)

if __name__ == "__main__":
    print("=== BRICK BREAKER ===")
    print()
    print("CONTROLS:")
    print("  Move: A/D (Q/D on AZERTY) or arrow keys")
    print("  Menu: W/S (Z/S on AZERTY) or arrow keys")
    print("  SPACE or ENTER: Launch ball / select")
    print("  ESC: Back to menu")
    print("  F11: Toggle fullscreen")
    print()

    try:
        main()
    except Exception as e:
        print(f"Error: {e}")
        traceback.print_exc()
        sys.exit(1)
