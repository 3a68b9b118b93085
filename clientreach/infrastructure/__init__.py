# Infrastructure Layer
# ====================
# Contains all external service integrations:
# - llm/: Gemini text generation client
# - places/: Google Places text search client
# - whatsapp/: WhatsApp gateway messaging provider
# - persistence/: SQLite task repository
# - importer/: Excel/CSV campaign sheet parser
# - config/: Environment and settings management
#
# This layer can be replaced entirely without affecting domain/application layers.
