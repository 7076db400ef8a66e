"""Shared help text for the init command."""

INIT_COMMAND_DOC = """
Initialize a folder for C# scripting with dotnet-script.

What Gets Created:
- .vscode/launch.json - debugger configuration
- omnisharp.json - editor configuration (pinned to the installed target framework)
- main.csx - hello world script (only when the folder has no .csx files yet)
- httpserver.csx - minimal ASP.NET Core script
- base/aspnet.csx, base/winui.csx - #r references to the shared frameworks

Running init again is safe: existing files are skipped, and the only change
ever made to an existing file is fixing the dotnet-script path in launch.json.

Examples:
  script-scaffold init                   # Current directory, main.csx
  script-scaffold init tool.csx          # Create tool.csx instead of main.csx
  script-scaffold init -d ./scripts      # Initialize another directory
"""
