"""
Command generator — produce the Go source of a new goman subcommand.

The file declares ``<name>Cmd`` and registers it with its parent in
``init()``.  Only the header, package clause, parent and command name
vary; the rest of the skeleton is fixed.
"""

from __future__ import annotations

import logging
import os
from datetime import date
from pathlib import Path

from gomanctl.core.models.settings import Settings
from gomanctl.core.models.template import EmissionContext, GeneratedFile
from gomanctl.core.services.file_writer import write_string_to_file
from gomanctl.core.services.template_engine import commentify, execute_template

logger = logging.getLogger(__name__)


COMMAND_TEMPLATE = """\
__COPYRIGHT__
// __IF_LICENSE__
__LICENSE__
// __ENDIF__

package __CMD_PACKAGE__

import (
	"fmt"

	"github.com/govenue/goman"
)

// __CMD_NAME__Cmd represents the __CMD_NAME__ command
var __CMD_NAME__Cmd = &goman.Command{
	Use:   "__CMD_NAME__",
	Short: "A brief description of your command",
	Long: `A longer description that spans multiple lines and likely contains examples
and usage of using your command. For example:

goman is a CLI library for Go that empowers applications.
This application is a tool to generate the needed files
to quickly create a goman application.`,
	Run: func(cmd *goman.Command, args []string) {
		fmt.Println("__CMD_NAME__ called")
	},
}

func init() {
	__PARENT_NAME__.AddCommand(__CMD_NAME__Cmd)

	// Here you will define your flags and configuration settings.

	// goman supports Persistent Flags which will work for this command
	// and all subcommands, e.g.:
	// __CMD_NAME__Cmd.PersistentFlags().String("foo", "", "A help for foo")

	// goman supports local flags which will only run when this command
	// is called directly, e.g.:
	// __CMD_NAME__Cmd.Flags().BoolP("toggle", "t", false, "Help message for toggle")
}
"""


def copyright_line(settings: Settings, today: date | None = None) -> str:
    """``Copyright © <year> <author>``; the year defaults to the current one."""
    year = settings.year or str((today or date.today()).year)
    return f"Copyright © {year} {settings.author}".rstrip()


def render_command(
    context: EmissionContext,
    target_path: Path,
    template: str = COMMAND_TEMPLATE,
) -> GeneratedFile:
    """Render a command file without writing it.

    The Go package of the file is the name of the directory it is
    written to, after ``..`` and ``.`` segments are resolved.

    Raises:
        TemplateError: If the template cannot be rendered.
    """
    target_path = Path(os.path.normpath(target_path))
    cmd_package = target_path.parent.name
    license_header = context.license_header.rstrip("\n")

    variables = {
        "COPYRIGHT": commentify(context.copyright_line),
        "LICENSE": commentify(license_header) if license_header else "",
        "CMD_PACKAGE": cmd_package,
        "PARENT_NAME": context.parent_name,
        "CMD_NAME": context.identifier,
    }
    content = execute_template(template, variables)

    return GeneratedFile(
        path=target_path,
        content=content,
        package=cmd_package,
        reason=f"Command {context.identifier} registered on {context.parent_name}",
    )


def emit(
    context: EmissionContext,
    target_path: Path,
    template: str = COMMAND_TEMPLATE,
) -> GeneratedFile:
    """Render a command file and create it at ``target_path``.

    Nothing is written unless rendering succeeds.

    Raises:
        TemplateError: If the template cannot be rendered.
        FileExistsError: If ``target_path`` already exists.
        OSError: If the file cannot be written.
    """
    generated = render_command(context, target_path, template)
    write_string_to_file(generated.path, generated.content)
    logger.info(
        "Generated %s (package %s, parent %s, project %s)",
        generated.path, generated.package, context.parent_name,
        context.package_name or "-",
    )
    return generated
