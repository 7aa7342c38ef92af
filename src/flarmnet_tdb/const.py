ERRORS = {
  "E_TRUNCATED": "Unexpected end of file",
  "E_MAGIC": "Invalid magic number",
  "E_FLARM_ID": "Invalid FLARM id",
  "E_TEXT_ENCODING": "Invalid UTF-8 in text field",
  "E_TEXT_VALUE": "Text field cannot be encoded as UTF-8",
  "E_FREQUENCY": "Invalid frequency",
  "E_VERSION": "Version does not fit in 32 bits",
}
