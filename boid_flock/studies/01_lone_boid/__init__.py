"""
Study 01: Lone Boid

Understand one before many.

Questions to explore:
- Does a boid with no neighbors ever turn?
- Does its self-inclusion setting change anything when it is alone?
"""
