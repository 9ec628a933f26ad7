"""
The MODEL layer contains pure data structures and game logic.
It has NO knowledge of the GUI (Qt).
It deals with the letter ring, gestures, the derivation tree, layout and scoring.
"""
