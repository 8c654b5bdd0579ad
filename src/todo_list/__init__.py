"""todo_list: a personal to-do list with a console front-end."""
