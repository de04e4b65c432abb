from task_viewer.render.cards import EMPTY_STATE, render_tasks, status_class

__all__ = ["EMPTY_STATE", "render_tasks", "status_class"]
