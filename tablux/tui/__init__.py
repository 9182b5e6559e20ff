"""
Tablux terminal UI.

Components:
    - TreeViewer / TableViewer: navigable state and rendering (tablux.tui.viewers)
    - update / view: the controller state machine (tablux.tui.controller)
    - TabluxApp: Textual host application (tablux.tui.app)
    - ViewerPanel: widget that renders the active viewer
    - LoadingScreen: shown while the input is parsed
"""
