from storerate.application.commands.admin.create_user_command import CreateUserCommand

__all__ = ["CreateUserCommand"]
