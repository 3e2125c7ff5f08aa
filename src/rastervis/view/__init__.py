"""
The VIEW layer contains the Qt widgets. It reads the SceneState and forwards
user input to the controller.
"""
