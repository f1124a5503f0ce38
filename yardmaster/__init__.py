"""
Yardmaster - car position tracking and train building for model railroads.
"""
