"""todo-cli - command line todo list manager."""
