# mdsitegen

A small static site generator. It reads a directory tree of Markdown files,
converts each one to HTML, puts the result into an HTML template, and writes
the pages to an output directory. Your static assets are copied into the same
directory.

## Installing

```
pip install .
```

## Building a site

The generator works from the current directory and expects this layout:

```
template.html          the page template (fixed path)
files/static/          files copied as they are into the output (fixed path)
files/content/         Markdown sources (default, can be changed at the prompt)
files/output/          generated site (default, deleted and rebuilt)
```

Run:

```
mdsitegen
```

The command asks for the Markdown directory and then for the output directory.
Each answer must be a single word. An empty line, or a line with more than one
word, keeps the default. The command then does three things in order:

1. It removes the old output directory.
2. It copies `files/static` into the output directory.
3. It renders every file under the Markdown directory.

For each file, the first `.md` in its name is replaced by `.html`, and the
result is written at the same relative path in the output. The command prints
`Error:` with the reason and exits with status 1 if any step fails, or prints
`Done` on success.

To publish under a sub-path, give exactly one argument:

```
mdsitegen blog
```

Every `href="/` and `src="/` in the generated pages then becomes
`href="/blog/` and `src="/blog/`. With no argument the base path is `/`.

### The template

Two placeholders in `template.html` are replaced:

- The first `{{ Title }}` becomes the page title.
- The first `{{ Content }}` becomes the rendered page.

The title is taken from the first block of the page, which must start with a
level-one header (`# Title`). A page without one is an error.

### Supported Markdown

Blocks are separated by a blank line:

- Headers: `#` to `######` followed by a space.
- Fenced code blocks: the block must start with a line of three backticks and
  end with a line of three backticks. The code is not parsed for inline
  markup.
- Quotes: every line starts with `>`. The lines are joined with spaces.
- Unordered lists: every line starts with `- `.
- Ordered lists: the lines are numbered `1. `, `2. `, … in order.
- Paragraphs: everything else. The lines are joined with spaces.

Inline markup is supported in all blocks except code:

- `**bold**`
- `_italic_`
- `` `code` ``
- `[text](url)` links
- `![alt](url)` images

Plain runs of text are rendered inside `<p>` elements.

An unclosed inline delimiter makes the text of its block empty. An empty
element cannot be rendered, so the page fails with an error. Text is inserted
as written; it is not HTML-escaped.

## Previewing

```
mdsitegen-serve
```

This serves `files/output` on port 8080 of every interface, for example at
`http://localhost:8080`. Stop it with Ctrl+C. `mdsitegen.server.make_server(directory, port)`
returns the same kind of server for any directory and port.

## Using it as a library

```python
from mdsitegen.blocks import markdown_to_html_node, extract_title

markdown = "# Hello\n\nSome **bold** text"
print(extract_title(markdown))                    # Hello
print(markdown_to_html_node(markdown).to_html())
```

The package has these modules:

- `mdsitegen.blocks` offers the block-level functions:
  - `markdown_to_blocks`
  - `get_block_type`, which returns a `BlockType`
  - `block_to_html`
  - `text_to_children`
- `mdsitegen.textnode` offers the inline parsing:
  - `TextNode` and `TextType`
  - `text_to_text_nodes`
  - `split_nodes_delimiter`
  - `split_nodes_ref`
  - `extract_markdown_refs`, which returns `Ref` values
- `mdsitegen.html_node` holds the node tree. It has `LeafNode`, `ParentNode`
  and `props_to_html`. Malformed markup raises `ValueError`.
- `mdsitegen.site` drives the build from your own code. It offers
  `copy_static_files_recursive`, `generate_page` and
  `generate_pages_recursive`.

## What it does not do

The generator is deliberately small:

- It does not watch files or rebuild automatically.
- It does not read front matter.
- It does not support nested lists, tables or links inside emphasis.
- The preview server only serves files. It does not rebuild the site.