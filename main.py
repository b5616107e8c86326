#!/usr/bin/env python3
"""
Perfect Circle - draw a circle freehand and see how perfect it is.

Drag inside the canvas to draw. The score measures how closely the closed
shape follows a circle; the best score of the session is kept as the high
score.
"""

from perfect_circle.app import main


if __name__ == "__main__":
    main()
