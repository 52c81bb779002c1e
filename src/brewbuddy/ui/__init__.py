"""
brewbuddy interactive terminal UI — ``src/brewbuddy/ui/``.

``state`` holds the pure data model and every transition; ``app`` and
``screens`` are the Textual layer that renders it and feeds it keys and ticks.

Entry point::

    from brewbuddy.ui.app import run
    run()
"""
