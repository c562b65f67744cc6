# sleeplog/utils/text.py


def truncate_bytes(text, limit, encoding='utf-8'):
    """
    Truncate text to at most `limit` encoded bytes without splitting a character.
    
    Args:
        text: String to truncate
        limit: Maximum number of encoded bytes
        encoding: Encoding the byte budget is measured in
        
    Returns:
        str: The original text, or its longest prefix that fits the budget
    """
    encoded = text.encode(encoding)
    if len(encoded) <= limit:
        return text
    return encoded[:limit].decode(encoding, errors='ignore')
