CONFIG = {
    # Number of blocks a single hybrid cache (one set) can hold
    "cache_size": 4,

    # Max predicted reuse probability must be strictly above this to trust the model
    "confidence_threshold": 0.88,

    # Scoring regime used when none is given
    "default_workload_mode": "Hostile",

    # Geometry for the set-associative front end
    "set_associative": {
        "num_sets": 16,
        "associativity": 4,
        "block_size": 64  # bytes
    },

    # Synthetic trace parameters
    "workload": {
        "key_space_size": 256,
        "num_requests": 2000,
        "seed": 42,
        "hot_set_size": 2,
        "scan_length": 5,
        "phase_length": 50,
        "zipf_alpha": 1.2
    },

    # Scoring regime applied while simulating each named workload
    "workload_modes": {
        "Friendly": "Friendly",
        "Mixed": "Hostile",
        "Hostile": "Hostile",
        "Alternating": "Hostile",
        "Scan Heavy": "Hostile"
    },

    # Performance tracking parameters
    "performance": {
        "window_size": 50  # Sample memory every 50 accesses
    }
}
