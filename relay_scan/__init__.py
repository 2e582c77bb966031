"""Find the lowest-latency VPN relays by filtering and probing a relay list."""
