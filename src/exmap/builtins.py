"""Standard ex commands installed in the default map."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from exmap.commands import ExMap

# (names, syntax, action, parameter names, documentation)
BUILTIN_COMMANDS: list[tuple[list[str], str, str, list[str], str]] = [
    (["!"], "re|", "ex_bang", ["command"], "Run +command+ in a shell, filtering the range through it if given."),
    (["append", "a"], "!l", "ex_append", [], "Append text after the line."),
    (["bdelete"], "!e1", "ex_bdelete", ["buffer"], "Delete +buffer+ from the buffer list."),
    (["buffer", "b"], "!e1", "ex_buffer", ["buffer"], "Edit +buffer+ from the buffer list."),
    (["buffers", "files", "ls"], "!", "ex_buffers", [], "List all buffers."),
    (["cd", "chdir"], "!e1x", "ex_cd", ["directory"], "Change the working directory to +directory+."),
    (["change"], "!rcR", "ex_change", [], "Replace lines with text."),
    (["close"], "!", "ex_close", [], "Close the current window."),
    (["copy", "co", "t"], "rLm", "ex_copy", [], "Copy the range below the line."),
    (["delete"], "rRcm", "ex_delete", [], "Delete lines into the register."),
    (["edit"], "!+e1x", "ex_edit", ["file"], "Edit +file+."),
    (["export"], "E|", "ex_export", ["variable"], "Set an environment +variable+."),
    (["file"], "", "ex_file", [], "Show the current file name and cursor position."),
    (["global", "g"], "!r%/e|", "ex_global", ["command"], "Run +command+ on lines matching the pattern."),
    (["help"], "e1", "ex_help", ["topic"], "Show help for +topic+."),
    (["join"], "!rcm", "ex_join", [], "Join lines."),
    (["mark", "k"], "rE1", "ex_mark", ["mark"], "Set +mark+ at the line."),
    (["move"], "rLm", "ex_move", [], "Move the range below the line."),
    (["new"], "", "ex_new", [], "Split the window and edit a new document."),
    (["nohlsearch", "noh"], "", "ex_nohlsearch", [], "Stop highlighting search matches."),
    (["normal", "norm"], "!r|E", "ex_normal", ["keys"], "Execute normal mode +keys+."),
    (["print", "p"], "rc", "ex_print", [], "Print lines."),
    (["put", "pu"], "!lRm", "ex_put", [], "Put text from the register after the line."),
    (["pwd"], "", "ex_pwd", [], "Print the working directory."),
    (["quit", "q"], "!", "ex_quit", [], "Close the current window."),
    (["quitall", "qall", "qa"], "!", "ex_quitall", [], "Exit the editor."),
    (["read"], "l+e1x", "ex_read", ["file"], "Insert the contents of +file+ below the line."),
    (["redo", "red"], "", "ex_redo", [], "Redo the last undone change."),
    (["set", "se"], "E", "ex_set", ["option"], "Set +option+."),
    (["source", "so"], "E1x", "ex_source", ["file"], "Read and evaluate +file+."),
    (["split", "sp"], "e1x", "ex_split", ["file"], "Split the window horizontally."),
    (["substitute", "s"], "r~cm", "ex_substitute", [], "Replace pattern matches in the range."),
    (["tabclose", "tabc"], "!", "ex_tabclose", [], "Close the current tab."),
    (["tabedit", "tabnew"], "e1x", "ex_tabedit", ["file"], "Edit +file+ in a new tab."),
    (["tabnext", "tabn"], "", "ex_tabnext", [], "Go to the next tab."),
    (["tabprevious", "tabp", "tabNext", "tabN"], "", "ex_tabprevious", [], "Go to the previous tab."),
    (["undo", "u"], "", "ex_undo", [], "Undo the last change."),
    (["vglobal", "v"], "r%/e|", "ex_vglobal", ["command"], "Run +command+ on lines not matching the pattern."),
    (["vnew"], "", "ex_vnew", [], "Split the window vertically and edit a new document."),
    (["vsplit", "vs"], "e1x", "ex_vsplit", ["file"], "Split the window vertically."),
    (["wall", "wa"], "!", "ex_wall", [], "Write all changed documents."),
    (["wq"], "!r%+e1x", "ex_wq", ["file"], "Write the document and close the window."),
    (["write", "w"], "!r%+e1x", "ex_write", ["file"], "Write the document to +file+."),
    (["xit", "x", "exit"], "!r%+e1x", "ex_xit", ["file"], "Write the document if changed and close the window."),
    (["yank", "y"], "rRc", "ex_yank", [], "Yank lines into the register."),
]


def define_builtins(ex_map: "ExMap") -> None:
    """Define the standard ex commands in ``ex_map``."""
    for names, syntax, action, parameter_names, documentation in BUILTIN_COMMANDS:
        ex_map.define(
            names,
            syntax,
            action,
            parameter_names=parameter_names,
            documentation=documentation,
        )
