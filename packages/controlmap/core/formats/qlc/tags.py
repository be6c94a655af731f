"""Element and attribute names of QLC+ input profile files."""

PROFILE_NAMESPACE = "http://www.qlcplus.org/InputProfile"
PROFILE_DOCTYPE = "InputProfile"

# Profile document
PROFILE_TAG = "InputProfile"
CREATOR_TAG = "Creator"
CREATOR_NAME_TAG = "Name"
CREATOR_VERSION_TAG = "Version"
CREATOR_AUTHOR_TAG = "Author"
MANUFACTURER_TAG = "Manufacturer"
MODEL_TAG = "Model"
PROFILE_TYPE_TAG = "Type"

# Channel element
CHANNEL_TAG = "Channel"
CHANNEL_NUMBER_ATTR = "Number"
CHANNEL_NAME_TAG = "Name"
CHANNEL_TYPE_TAG = "Type"
EXTRA_PRESS_TAG = "ExtraPress"
EXTRA_PRESS_MARKER = "True"
MOVEMENT_TAG = "Movement"
SENSITIVITY_ATTR = "Sensitivity"
RELATIVE_MARKER = "Relative"
FEEDBACKS_TAG = "Feedbacks"
LOWER_VALUE_ATTR = "LowerValue"
UPPER_VALUE_ATTR = "UpperValue"
