# ClientReach - AI-Assisted Client Discovery & WhatsApp Outreach
# ===============================================================
# A small HTTP service using Layered Architecture:
#
# ARCHITECTURE LAYERS:
# - Presentation:   FastAPI routes and request/response schemas (web/)
# - Application:    Workflows that sequence external calls (no parsing rules)
# - Domain:         Pure parsing and value types (no external dependencies)
# - Infrastructure: External services (Gemini, Google Places, WhatsApp, SQLite)
#
# This design allows easy replacement of infrastructure components
# (e.g., swap Gemini for another LLM, or the WhatsApp gateway for Cloud API).

__version__ = "0.1.0"
