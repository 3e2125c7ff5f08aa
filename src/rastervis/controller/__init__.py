"""
The CONTROLLER layer reacts to user actions, updates the SceneState and paces
the step-by-step reveal of rasterized points.
"""
