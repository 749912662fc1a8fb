"""Extract and check ``Authorization: ApiKey <key>`` credentials."""
