"""flashdeck: user management and AI-assisted flashcards over interchangeable storage backends."""
