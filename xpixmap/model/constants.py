XPM_EXT_TAG = "XPMEXT"
XPM_EXT_END = "XPMENDEXT"

# Leading character of the optional "! XPM2" style file-type line.
FILE_TYPE_MARKER = "!"

NEWLINE = "\n"
