"""Click subcommands for badchecks; each one calls a service and emits its result."""
