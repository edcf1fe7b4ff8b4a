# Background services package
