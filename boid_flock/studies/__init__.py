"""
Studies: Structured experiments for understanding.

Each study begins with observation, not hypothesis.
Understand one before many.

Study progression:
1. Lone boid - nothing to steer by, so it flies straight
2. Mirror pair - two boids, mirror-image turns
3. Default flock - five boids chasing a pointer
"""
