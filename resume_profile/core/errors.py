class TextExtractionError(Exception):
    """The source document could not be turned into text.

    The message is safe to show to the user. Extraction is never retried here;
    callers decide whether to try again with another file.
    """
