"""
Study 03: Default Flock

Understand emergence.

Questions to explore:
- Do five boids hold together while chasing a moving pointer?
- How crowded do they get with a personal radius of 2?
"""
