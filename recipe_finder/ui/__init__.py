from recipe_finder.ui.render import preview_instructions, render_item, render_state

__all__ = ["preview_instructions", "render_item", "render_state"]
