"""
Scordle Game Server - Main Entry Point

This is the main entry point for the game server.
It validates the word data, initializes all services and starts the
Flask-SocketIO application.
"""

from scordle import create_app
from scordle.config import Config, ConfigurationError, validate_word_list_integrity, get_word_statistics
from scordle.services.game_service import initialize_game_service
from scordle.services.score_history_service import initialize_score_history_service
from scordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Validating word lists...")
        validate_word_list_integrity()
        print(f"✓ Word lists valid: {get_word_statistics()['eligible_targets']} eligible targets")

        print("Initializing services...")
        score_history = initialize_score_history_service(Config.MONGO_URI)
        if score_history.persistent:
            print("✓ Score history stored in MongoDB")
        else:
            print("✓ Score history stored in memory (MONGO_URI not configured)")

        initialize_game_service(score_history)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Scordle Server Starting")

        print(f"\nStarting Scordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Scordle Server shutting down (KeyboardInterrupt)")
    except ConfigurationError as e:
        print(f"Invalid game data: {e}")
        game_logger.logger.error(f"Invalid game data: {e}")
        raise
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
