from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from admin_panel.app.directory_controller import DirectoryController
from admin_panel.app.ui.table_printer import format_pagination_bar, print_directory

HELP_TEXT = """Commands:
  s <text>         search by name or email (s alone clears the search)
  x <id>           toggle selection of one row
  a                select / clear every row on the page
  d <id>           delete one row
  D                delete selected rows
  e <id>           edit a row
  f <field> <val>  change name, email or role of the row being edited
  w                save the edit
  c                cancel the edit
  g <n>            go to page n
  < / > / << / >>  previous / next / first / last page
  r                reload from the server
  q                quit"""


class AdminConsole:
    def __init__(
        self,
        controller: DirectoryController,
        run_async: Callable[[Awaitable[Any]], Any],
        prompt: Callable[[str], str] = input,
    ) -> None:
        self.controller = controller
        self._run_async = run_async
        self._prompt = prompt

    def run(self) -> None:
        self.reload()
        while True:
            self.render()
            command = self._prompt("Action (h=help): ").strip()
            if command == "q":
                return
            self.dispatch(command)

    def reload(self) -> None:
        print("Loading")
        self._run_async(self.controller.load())

    def render(self) -> None:
        view = self.controller.view()
        status = self.controller.status()
        session = self.controller.edit_session
        print_directory(view, editing_id=session.target_id, draft=session.draft)
        if status.message:
            print(status.message)
        print(format_pagination_bar(view))
        print(f"Selected: {view.selected_count} (D={'enabled' if view.selected_count else 'disabled'})")

    def dispatch(self, command: str) -> None:
        verb, _, argument = command.partition(" ")
        argument = argument.strip()
        controller = self.controller

        if verb == "h":
            print(HELP_TEXT)
        elif verb == "s":
            controller.search(argument)
        elif verb == "x" and argument:
            self._report(controller.select_one(argument), f"{argument} is not in the current results.")
        elif verb == "a":
            controller.select_page()
        elif verb == "d" and argument:
            self._report(controller.delete_one(argument), f"{argument} no longer exists.")
        elif verb == "D":
            removed = controller.delete_selected()
            print(f"Deleted {removed} rows." if removed else "Nothing selected.")
        elif verb == "e" and argument:
            self._report(controller.begin_edit(argument), f"{argument} is not on this page.")
        elif verb == "f" and argument:
            self._edit_field(argument)
        elif verb == "w":
            self._save()
        elif verb == "c":
            controller.cancel_edit()
        elif verb == "g" and argument.isdigit():
            controller.go_to_page(int(argument))
        elif verb == "<":
            controller.previous_page()
        elif verb == ">":
            controller.next_page()
        elif verb == "<<":
            controller.first_page()
        elif verb == ">>":
            controller.last_page()
        elif verb == "r":
            self.reload()
        else:
            print("Unknown command.")

    def _edit_field(self, argument: str) -> None:
        field_name, _, value = argument.partition(" ")
        try:
            changed = self.controller.edit_field(field_name, value.strip())
        except ValueError as error:
            print(f"[invalid] {error}")
            return
        self._report(changed, "No row is being edited.")

    def _save(self) -> None:
        form = self.controller.validate_edit()
        if form is None:
            print("No row is being edited.")
            return
        if not form.is_valid:
            field_name = form.first_invalid_field
            print(f"[invalid] {field_name}: {form.field_errors[field_name]}")
            return
        self._report(self.controller.save_edit(), "The edited row no longer exists.")

    @staticmethod
    def _report(ok: bool, failure_message: str) -> None:
        if not ok:
            print(failure_message)
