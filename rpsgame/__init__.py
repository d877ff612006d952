"""Rock-Paper-Scissors: a round-limited user-vs-computer console match."""
