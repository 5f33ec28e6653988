"""
Study 02: Mirror Pair

Understand interaction.

Questions to explore:
- Do mirror-image boids make mirror-image turns?
- How long does the symmetry last?
"""
