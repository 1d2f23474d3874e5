from arxiv_md.models.paper import DetailLevel, ExtractedDocument


def assemble(doc: ExtractedDocument, level: DetailLevel = DetailLevel.ALL) -> str:
    """Concatenate the extracted regions selected by ``level`` into one Markdown document."""
    level = DetailLevel.parse(level)
    md = ""

    if doc.title:
        md += f"# {doc.title}\n\n"

    # Appendix-only output skips the author line
    if doc.authors and level is not DetailLevel.APPENDIX:
        md += f"**Authors:** {doc.authors}\n\n"

    if level is DetailLevel.ABSTRACT:
        md += f"## Abstract\n\n{doc.abstract}\n"
    elif level is DetailLevel.BODY:
        md += _abstract_block(doc)
        md += doc.body
    elif level is DetailLevel.APPENDIX:
        md += doc.appendix
    else:
        md += _abstract_block(doc)
        md += doc.body
        md += doc.references
        if doc.appendix:
            md += f"---\n\n# Appendix\n\n{doc.appendix}"

    return md


def _abstract_block(doc: ExtractedDocument) -> str:
    if not doc.abstract:
        return ""
    return f"## Abstract\n\n{doc.abstract}\n\n"
