"""Template helper functions and the function maps that group them."""