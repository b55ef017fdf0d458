"""Built-in syntax table.

Pure data: one SyntaxProfile per language. Extensions and filenames must be
unique across the table (the registry rejects clashes).
"""

from __future__ import annotations

from locc.models.syntax import BlockComment, EmbeddingRule, StringLiteral, SyntaxProfile

# Shared delimiter sets
C_BLOCK = BlockComment("/*", "*/")
C_BLOCK_NESTED = BlockComment("/*", "*/", nestable=True)
XML_BLOCK = BlockComment("<!--", "-->")

DQ = StringLiteral('"', '"', multiline=False)
SQ = StringLiteral("'", "'", multiline=False)
DQ_MULTI = StringLiteral('"', '"')
SQ_RAW = StringLiteral("'", "'", escape=None)
BACKTICK = StringLiteral("`", "`")

STYLE_TO_CSS = EmbeddingRule(r"<style\b[^>]*>", r"</style\s*>", "css")
SCRIPT_TO_JS = EmbeddingRule(r"<script\b[^>]*>", r"</script\s*>", "javascript")


PROFILES: tuple[SyntaxProfile, ...] = (
    SyntaxProfile(
        id="c",
        name="C",
        line_comments=("//",),
        block_comments=(C_BLOCK,),
        strings=(DQ, SQ),
        extensions=("c", "h"),
    ),
    SyntaxProfile(
        id="cmake",
        name="CMake",
        line_comments=("#",),
        block_comments=(BlockComment("#[[", "]]"),),
        strings=(DQ_MULTI,),
        extensions=("cmake",),
        filenames=("cmakelists.txt",),
    ),
    SyntaxProfile(
        id="cpp",
        name="C++",
        line_comments=("//",),
        block_comments=(C_BLOCK,),
        strings=(StringLiteral('R"(', ')"', escape=None), DQ, SQ),
        extensions=("cc", "cpp", "cxx", "c++", "hpp", "hh", "hxx", "h++", "ipp", "inl"),
    ),
    SyntaxProfile(
        id="csharp",
        name="C#",
        line_comments=("//",),
        block_comments=(C_BLOCK,),
        strings=(StringLiteral('@"', '"', escape=None), DQ, SQ),
        extensions=("cs", "csx"),
    ),
    SyntaxProfile(
        id="clojure",
        name="Clojure",
        line_comments=(";",),
        strings=(DQ_MULTI,),
        extensions=("clj", "cljs", "cljc", "edn"),
    ),
    SyntaxProfile(
        id="css",
        name="CSS",
        block_comments=(C_BLOCK,),
        strings=(DQ, SQ),
        extensions=("css",),
    ),
    SyntaxProfile(
        id="d",
        name="D",
        line_comments=("//",),
        block_comments=(C_BLOCK, BlockComment("/+", "+/", nestable=True)),
        strings=(DQ_MULTI, SQ, StringLiteral("`", "`", escape=None)),
        extensions=("d", "di"),
    ),
    SyntaxProfile(
        id="dart",
        name="Dart",
        line_comments=("//",),
        block_comments=(C_BLOCK_NESTED,),
        strings=(
            StringLiteral('"""', '"""'),
            StringLiteral("'''", "'''"),
            DQ,
            SQ,
        ),
        extensions=("dart",),
    ),
    SyntaxProfile(
        id="dockerfile",
        name="Dockerfile",
        line_comments=("#",),
        strings=(DQ, SQ),
        extensions=("dockerfile",),
        filenames=("dockerfile", "containerfile"),
    ),
    SyntaxProfile(
        id="elixir",
        name="Elixir",
        line_comments=("#",),
        strings=(
            StringLiteral('"""', '"""', doc=True),
            StringLiteral("'''", "'''", doc=True),
            DQ_MULTI,
            SQ,
        ),
        extensions=("ex", "exs"),
        interpreters=("elixir",),
    ),
    SyntaxProfile(
        id="erlang",
        name="Erlang",
        line_comments=("%",),
        strings=(DQ_MULTI,),
        extensions=("erl", "hrl"),
        interpreters=("escript",),
    ),
    SyntaxProfile(
        id="go",
        name="Go",
        line_comments=("//",),
        block_comments=(C_BLOCK,),
        strings=(DQ, SQ, StringLiteral("`", "`", escape=None)),
        extensions=("go",),
    ),
    SyntaxProfile(
        id="groovy",
        name="Groovy",
        line_comments=("//",),
        block_comments=(C_BLOCK,),
        strings=(
            StringLiteral('"""', '"""'),
            StringLiteral("'''", "'''"),
            DQ,
            SQ,
        ),
        extensions=("groovy", "gradle", "gvy"),
        filenames=("jenkinsfile",),
        interpreters=("groovy",),
    ),
    SyntaxProfile(
        id="haskell",
        name="Haskell",
        line_comments=("--",),
        block_comments=(BlockComment("{-", "-}", nestable=True),),
        strings=(DQ,),
        extensions=("hs",),
        interpreters=("runhaskell", "runghc"),
    ),
    SyntaxProfile(
        id="html",
        name="HTML",
        block_comments=(XML_BLOCK,),
        embeddings=(STYLE_TO_CSS, SCRIPT_TO_JS),
        extensions=("html", "htm", "xhtml"),
    ),
    SyntaxProfile(
        id="ini",
        name="INI",
        line_comments=(";", "#"),
        extensions=("ini", "cfg", "conf"),
    ),
    SyntaxProfile(
        id="java",
        name="Java",
        line_comments=("//",),
        block_comments=(C_BLOCK,),
        strings=(StringLiteral('"""', '"""'), DQ, SQ),
        extensions=("java",),
    ),
    SyntaxProfile(
        id="javascript",
        name="JavaScript",
        line_comments=("//",),
        block_comments=(C_BLOCK,),
        strings=(DQ, SQ, BACKTICK),
        extensions=("js", "mjs", "cjs", "jsx"),
        interpreters=("node", "nodejs"),
    ),
    SyntaxProfile(
        id="json",
        name="JSON",
        strings=(DQ,),
        extensions=("json",),
    ),
    SyntaxProfile(
        id="julia",
        name="Julia",
        line_comments=("#",),
        block_comments=(BlockComment("#=", "=#", nestable=True),),
        strings=(StringLiteral('"""', '"""', doc=True), DQ_MULTI),
        extensions=("jl",),
        interpreters=("julia",),
    ),
    SyntaxProfile(
        id="kotlin",
        name="Kotlin",
        line_comments=("//",),
        block_comments=(C_BLOCK_NESTED,),
        strings=(StringLiteral('"""', '"""', escape=None), DQ, SQ),
        extensions=("kt", "kts"),
    ),
    SyntaxProfile(
        id="less",
        name="Less",
        line_comments=("//",),
        block_comments=(C_BLOCK,),
        strings=(DQ, SQ),
        extensions=("less",),
    ),
    SyntaxProfile(
        id="lua",
        name="Lua",
        line_comments=("--",),
        block_comments=(BlockComment("--[[", "]]"),),
        strings=(DQ, SQ, StringLiteral("[[", "]]", escape=None)),
        extensions=("lua",),
        interpreters=("lua",),
    ),
    SyntaxProfile(
        id="makefile",
        name="Makefile",
        line_comments=("#",),
        extensions=("mk", "mak"),
        filenames=("makefile", "gnumakefile"),
        interpreters=("make",),
    ),
    SyntaxProfile(
        id="markdown",
        name="Markdown",
        block_comments=(XML_BLOCK,),
        extensions=("md", "markdown"),
    ),
    SyntaxProfile(
        id="objective_c",
        name="Objective-C",
        line_comments=("//",),
        block_comments=(C_BLOCK,),
        strings=(DQ, SQ),
        extensions=("m",),
    ),
    SyntaxProfile(
        id="ocaml",
        name="OCaml",
        block_comments=(BlockComment("(*", "*)", nestable=True),),
        strings=(DQ_MULTI,),
        extensions=("ml", "mli"),
        interpreters=("ocaml",),
    ),
    SyntaxProfile(
        id="perl",
        name="Perl",
        line_comments=("#",),
        block_comments=(BlockComment("=pod", "=cut"), BlockComment("=head1", "=cut")),
        strings=(DQ_MULTI, SQ_RAW),
        extensions=("pl", "pm"),
        interpreters=("perl",),
    ),
    SyntaxProfile(
        id="php",
        name="PHP",
        line_comments=("//", "#"),
        block_comments=(C_BLOCK,),
        strings=(DQ_MULTI, StringLiteral("'", "'")),
        extensions=("php",),
        interpreters=("php",),
    ),
    SyntaxProfile(
        id="powershell",
        name="PowerShell",
        line_comments=("#",),
        block_comments=(BlockComment("<#", "#>"),),
        strings=(StringLiteral('"', '"', escape="`"), SQ_RAW),
        extensions=("ps1", "psm1", "psd1"),
        interpreters=("pwsh",),
    ),
    SyntaxProfile(
        id="protobuf",
        name="Protocol Buffers",
        line_comments=("//",),
        block_comments=(C_BLOCK,),
        strings=(DQ, SQ),
        extensions=("proto",),
    ),
    SyntaxProfile(
        id="python",
        name="Python",
        line_comments=("#",),
        strings=(
            StringLiteral('"""', '"""', doc=True),
            StringLiteral("'''", "'''", doc=True),
            DQ,
            SQ,
        ),
        extensions=("py", "pyw", "pyi"),
        interpreters=("python", "pypy"),
    ),
    SyntaxProfile(
        id="r",
        name="R",
        line_comments=("#",),
        strings=(DQ_MULTI, StringLiteral("'", "'")),
        extensions=("r",),
        interpreters=("rscript",),
    ),
    SyntaxProfile(
        id="ruby",
        name="Ruby",
        line_comments=("#",),
        block_comments=(BlockComment("=begin", "=end"),),
        strings=(DQ_MULTI, StringLiteral("'", "'")),
        extensions=("rb", "rake", "gemspec"),
        filenames=("rakefile", "gemfile"),
        interpreters=("ruby",),
    ),
    SyntaxProfile(
        id="rust",
        name="Rust",
        line_comments=("//",),
        block_comments=(C_BLOCK_NESTED,),
        # No single-quote literal: lifetimes ('a) would open one.
        strings=(StringLiteral('r#"', '"#', escape=None), DQ_MULTI),
        extensions=("rs",),
    ),
    SyntaxProfile(
        id="scala",
        name="Scala",
        line_comments=("//",),
        block_comments=(C_BLOCK_NESTED,),
        strings=(StringLiteral('"""', '"""', escape=None), DQ),
        extensions=("scala", "sc"),
        interpreters=("scala",),
    ),
    SyntaxProfile(
        id="scss",
        name="Sass",
        line_comments=("//",),
        block_comments=(C_BLOCK,),
        strings=(DQ, SQ),
        extensions=("scss", "sass"),
    ),
    SyntaxProfile(
        id="shell",
        name="Shell",
        line_comments=("#",),
        strings=(DQ_MULTI, SQ_RAW),
        extensions=("sh", "bash", "zsh", "ksh"),
        filenames=(".bashrc", ".bash_profile", ".zshrc", ".profile"),
        interpreters=("sh", "bash", "zsh", "ksh", "dash"),
    ),
    SyntaxProfile(
        id="sql",
        name="SQL",
        line_comments=("--",),
        block_comments=(C_BLOCK,),
        strings=(StringLiteral("'", "'", escape=None),),
        extensions=("sql",),
    ),
    SyntaxProfile(
        id="swift",
        name="Swift",
        line_comments=("//",),
        block_comments=(C_BLOCK_NESTED,),
        strings=(StringLiteral('"""', '"""'), DQ),
        extensions=("swift",),
    ),
    SyntaxProfile(
        id="tex",
        name="TeX",
        line_comments=("%",),
        extensions=("tex", "sty", "cls"),
    ),
    SyntaxProfile(
        id="text",
        name="Plain Text",
        extensions=("txt", "text"),
    ),
    SyntaxProfile(
        id="toml",
        name="TOML",
        line_comments=("#",),
        strings=(
            StringLiteral('"""', '"""'),
            StringLiteral("'''", "'''", escape=None),
            DQ,
            StringLiteral("'", "'", escape=None, multiline=False),
        ),
        extensions=("toml",),
    ),
    SyntaxProfile(
        id="typescript",
        name="TypeScript",
        line_comments=("//",),
        block_comments=(C_BLOCK,),
        strings=(DQ, SQ, BACKTICK),
        extensions=("ts", "tsx", "mts", "cts"),
        interpreters=("ts-node", "deno"),
    ),
    SyntaxProfile(
        id="vue",
        name="Vue",
        block_comments=(XML_BLOCK,),
        embeddings=(STYLE_TO_CSS, SCRIPT_TO_JS),
        extensions=("vue",),
    ),
    SyntaxProfile(
        id="xml",
        name="XML",
        block_comments=(XML_BLOCK,),
        extensions=("xml", "xsd", "xsl", "xslt", "svg", "plist"),
    ),
    SyntaxProfile(
        id="yaml",
        name="YAML",
        line_comments=("#",),
        strings=(DQ, StringLiteral("'", "'", escape=None, multiline=False)),
        extensions=("yml", "yaml"),
    ),
    SyntaxProfile(
        id="zig",
        name="Zig",
        line_comments=("//",),
        strings=(DQ, SQ),
        extensions=("zig",),
    ),
)
