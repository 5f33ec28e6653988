"""
Boid Flock: cohesion and separation steering for a 2D flock of autonomous agents

Each tick runs three phases in strict order:
sense who is near, plan a turn rate, integrate the pose.
Pseudo-boids pull on the flock without being pulled back.
"""

__version__ = "0.1.0"
