"""TODO plugin service: a per-user todo list for conversational agents."""
