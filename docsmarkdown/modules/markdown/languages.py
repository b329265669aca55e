"""Code languages recognised by the docs renderer.

The catalog is read-only and kept in declaration order: when two entries
claim the same extension, the first one wins.
"""

from collections import namedtuple

from docsmarkdown.framework.editor import Choice

LanguageDescriptor = namedtuple("LanguageDescriptor", ["language", "aliases", "extensions"])


def _lang(language, aliases, extensions=()):
    return LanguageDescriptor(language, tuple(aliases), tuple(extensions))


LANGUAGES = (
    _lang(".NET Core CLI", ["dotnetcli"]),
    _lang("1C", ["1c"]),
    _lang("ABNF", ["abnf"]),
    _lang("ASP.NET (C#)", ["aspx-csharp"]),
    _lang("ASP.NET (VB)", ["aspx-vb"]),
    _lang("ActionScript", ["actionscript", "as"], [".as"]),
    _lang("Ada", ["ada"], [".adb", ".ads"]),
    _lang("Apache", ["apache", "apacheconf"]),
    _lang("AppleScript", ["applescript", "osascript"], [".scpt"]),
    _lang("Arduino", ["arduino"], [".ino"]),
    _lang("AsciiDoc", ["asciidoc", "adoc"], [".adoc"]),
    _lang("AspectJ", ["aspectj"], [".aj"]),
    _lang("Azure CLI", ["azurecli"]),
    _lang("Azure CLI (Interactive)", ["azurecli-interactive"]),
    _lang("Azure Powershell", ["azurepowershell"]),
    _lang("Azure Powershell (Interactive)", ["azurepowershell-interactive"]),
    _lang("Bash", ["bash", "sh", "zsh"], [".sh", ".bash", ".zsh"]),
    _lang("Bicep", ["bicep"], [".bicep"]),
    _lang("C", ["c"], [".c", ".h"]),
    _lang("C#", ["csharp", "cs"], [".cs", ".csx", ".cake"]),
    _lang("C# (Interactive)", ["csharp-interactive"]),
    _lang("C++", ["cpp", "c", "cc", "h", "c++", "h++", "hpp"],
          [".cpp", ".cc", ".cxx", ".c++", ".h", ".hh", ".hpp", ".hxx", ".h++"]),
    _lang("C++/CX", ["cppcx"]),
    _lang("C++/WinRT", ["cppwinrt"]),
    _lang("CMake", ["cmake", "cmake.in"], [".cmake"]),
    _lang("COBOL", ["cobol", "standard-cobol"], [".cbl", ".cob"]),
    _lang("CoffeeScript", ["coffeescript", "coffee", "cson", "iced"], [".coffee"]),
    _lang("Console", ["console"]),
    _lang("CSS", ["css"], [".css"]),
    _lang("Dart", ["dart"], [".dart"]),
    _lang("Dockerfile", ["dockerfile", "docker"], [".dockerfile"]),
    _lang("Elixir", ["elixir"], [".ex", ".exs"]),
    _lang("Erlang", ["erlang", "erl"], [".erl", ".hrl"]),
    _lang("Excel", ["excel", "xls", "xlsx"], [".xls", ".xlsx"]),
    _lang("F#", ["fsharp", "fs"], [".fs", ".fsi", ".fsx"]),
    _lang("Fortran", ["fortran", "f90", "f95"], [".f90", ".f95", ".for"]),
    _lang("Go", ["go", "golang"], [".go"]),
    _lang("Gradle", ["gradle"], [".gradle"]),
    _lang("GraphQL", ["graphql"], [".graphql", ".gql"]),
    _lang("Groovy", ["groovy"], [".groovy", ".gvy"]),
    _lang("Haskell", ["haskell", "hs"], [".hs"]),
    _lang("HCL", ["hcl"], [".hcl"]),
    _lang("HTML", ["html", "xhtml"], [".html", ".htm", ".xhtml"]),
    _lang("HTTP", ["http", "https"], [".http"]),
    _lang("INI", ["ini"], [".ini", ".cfg"]),
    _lang("Java", ["java", "jsp"], [".java", ".jsp"]),
    _lang("JavaScript", ["javascript", "js", "jsx"], [".js", ".jsx", ".mjs", ".cjs"]),
    _lang("JSON", ["json"], [".json"]),
    _lang("Julia", ["julia", "julia-repl"], [".jl"]),
    _lang("Kotlin", ["kotlin", "kt"], [".kt", ".kts"]),
    _lang("Kusto", ["kusto"], [".csl", ".kql"]),
    _lang("LaTeX", ["latex", "tex"], [".tex"]),
    _lang("Lisp", ["lisp"], [".lisp", ".lsp"]),
    _lang("Lua", ["lua"], [".lua"]),
    _lang("Makefile", ["makefile", "mk", "mak"], [".mk", ".mak"]),
    _lang("Markdown", ["markdown", "md", "mkdown", "mkd"], [".md", ".markdown"]),
    _lang("MATLAB", ["matlab"], [".m"]),
    _lang("Nginx", ["nginx", "nginxconf"]),
    _lang("Objective C", ["objectivec", "mm", "objc", "obj-c"], [".mm"]),
    _lang("OCaml", ["ocaml", "ml"], [".ml", ".mli"]),
    _lang("Pascal", ["delphi", "dpr", "dfm", "pas", "pascal"], [".pas", ".dpr", ".dfm"]),
    _lang("Perl", ["perl", "pl", "pm"], [".pl", ".pm"]),
    _lang("PHP", ["php", "php3", "php4", "php5", "php6"], [".php", ".php3", ".php4", ".php5"]),
    _lang("PowerApps Formula", ["powerappsfl"]),
    _lang("PowerShell", ["powershell", "ps", "ps1"], [".ps1", ".psm1", ".psd1"]),
    _lang("Protocol Buffers", ["protobuf"], [".proto"]),
    _lang("Python", ["python", "py", "gyp"], [".py", ".pyw", ".gyp"]),
    _lang("Q#", ["qsharp"], [".qs"]),
    _lang("R", ["r"], [".r"]),
    _lang("Razor CSHTML", ["cshtml", "razor", "razor-cshtml"], [".cshtml", ".razor"]),
    _lang("REST API", ["rest"]),
    _lang("Ruby", ["ruby", "rb", "gemspec", "podspec", "thor", "irb"],
          [".rb", ".gemspec", ".podspec", ".thor"]),
    _lang("Rust", ["rust", "rs"], [".rs"]),
    _lang("SAS", ["sas"], [".sas"]),
    _lang("Scala", ["scala"], [".scala", ".sc"]),
    _lang("Scheme", ["scheme"], [".scm", ".ss"]),
    _lang("Small Basic", ["smallbasic"], [".sb"]),
    _lang("SQL", ["sql"], [".sql"]),
    _lang("Swift", ["swift"], [".swift"]),
    _lang("Terraform", ["terraform"], [".tf", ".tfvars"]),
    _lang("TypeScript", ["typescript", "ts", "tsx"], [".ts", ".tsx"]),
    _lang("VB.NET", ["vbnet", "vb"], [".vb"]),
    _lang("VBA", ["vba"], [".bas", ".cls"]),
    _lang("VBScript", ["vbscript", "vbs"], [".vbs"]),
    _lang("Verilog", ["verilog", "v"], [".v", ".sv"]),
    _lang("VSTS CLI", ["vstscli"]),
    _lang("XAML", ["xaml"], [".xaml"]),
    _lang("XML", ["xml", "rss", "atom", "xjb", "xsd", "xsl", "plist", "svg"],
          [".xml", ".xsd", ".xsl", ".xslt", ".plist", ".csproj", ".vbproj", ".props", ".config"]),
    _lang("YAML", ["yaml", "yml"], [".yaml", ".yml"]),
)


def infer_language_from_file_extension(file_extension, catalog=LANGUAGES):
    """Return the first descriptor listing *file_extension* (e.g. ".py"), or None.

    The comparison is exact: ".PY" does not match ".py".
    """
    for descriptor in catalog:
        if file_extension in descriptor.extensions:
            return descriptor
    return None


def find_language(display_name, catalog=LANGUAGES):
    """Look a descriptor up by its display name."""
    for descriptor in catalog:
        if descriptor.language == display_name:
            return descriptor
    return None


def get_language_choices(catalog=LANGUAGES):
    """The whole catalog as Choices for manual selection."""
    return [
        Choice(descriptor.language, ", ".join(descriptor.aliases))
        for descriptor in catalog
    ]
