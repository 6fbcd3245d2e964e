"""NiceGUI interface - thin visualization layer over the backend clients.

Responsibilities:
    - Login form storing the bearer token per browser
    - Chat page with streamed replies and session sidebar
    - Dashboard with journal and planner statistics
    - Journal, planner and emotion log pages

Contains no business logic. Chat state lives in ``eunoia.chat``, data
access in ``eunoia.client``.
"""
