"""Hyprland IPC client and the workspace, window and submap views built on it."""

__all__ = ["ipc", "submap", "window", "workspaces"]