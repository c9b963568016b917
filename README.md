# staticpp

staticpp builds a static website from a directory of Markdown files. It
expects a blog-shaped source tree, converts every `.md` file to HTML, and
writes the result into an output directory that has the same layout as the
source.

## Installation

```
pip install .
```

## Source layout

The source directory must contain these three subdirectories:

```
blog_src/
├── index.md
├── posts/
│   ├── first_post.md
│   └── second_post.md
├── pages/
│   └── about.md
└── assets/
    └── image.jpg
```

If any of `posts`, `pages` or `assets` is missing, the build stops and an
error is printed.

A Markdown file may begin with a YAML front-matter block between `---` lines.
The block must start at the very first character of the file:

```
---
title: My first post
---
## my first post
some content.
```

The block is removed from the page and parsed as metadata. When the metadata
has a `title`, the title is printed during the build. If the block is not
valid YAML, it is still removed, a parse error is printed on stderr and the
page has no metadata.

## Command line

```
ssg build <src_path> [-o output_path]
```

For example:

```
ssg build blog_src -o dist
```

This turns `blog_src/posts/first_post.md` into `dist/posts/first_post.html`,
and does the same for every other Markdown file. Directories are recreated
under the output path; files that are not Markdown are not copied. The output
tree is written only when `-o` is given; without it the source is only
checked and read.

The command exits with status 1 and prints a usage line when its arguments
are wrong. Problems found during the build (a missing source directory, a
missing `posts`, `pages` or `assets` directory) are printed on stderr as
`err: ...`, and the command still exits with status 0.

## Library use

```python
from staticpp.filemanager import FileManager

fm = FileManager(["posts", "pages", "assets"])
fm.set_base_path("blog_src")
fm.validate_file_structure()
tree = fm.read_files()
tree.traverse_and_print(tree.root, 0)
tree.traverse_convert_and_build_dist(tree.root, "dist", 0)
```

`FileManager` raises `staticpp.filemanager.SiteStructureError` when the base
path or the expected directories are missing. `traverse_and_print` prints the
tree, one indented `[DIR]` or `[FILE]` line per entry, with the size of each
Markdown file's text.

You can also convert one document yourself:

```python
from staticpp.document import Markdown, convert_to_html

md = Markdown("post.md", "---\ntitle: Hello\n---\n# Hello\nworld")
doc = convert_to_html(md)
print(doc.metadata)   # {'title': 'Hello'}
print(doc.content)    # the rendered HTML
```

`staticpp.document.extract_and_remove_metadata(md)` does the front-matter
step on its own. `staticpp.generator.Generator(src_path, out_path)` runs the
same steps as the `ssg build` command, reporting errors on stderr instead of
raising them.

## What it does not do

- Templates are not applied. `transform_document_with_template` returns the
  rendered content unchanged when the template is missing or is an `.rhtml`
  file, and raises `TemplateError` for any other kind of template; the build
  does not call it, so pages are written as bare HTML fragments.
- Assets and other non-Markdown files are not copied to the output.
- There is no development server and no watch mode.