"""Game objects: bird, pipes, ground, background, score display, board and restart button."""