"""HTTP and WebSocket adapter exposing the game to a browser client."""
