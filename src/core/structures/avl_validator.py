import math
from typing import Any, List, Optional
from src.core.models.avl_node import AVLNode

class AVLValidator:
    """
    Verificação das invariantes da Árvore AVL:
    1. Ordenação de BST (esquerda <= nó <= direita; estrita quando não há duplicatas)
    2. Altura em cache correta em todo nó
    3. Balanceamento |h(esq) - h(dir)| <= 1
    Usada pelos testes e por quem precisa auditar uma árvore montada por fora.
    """
    HEIGHT_FACTOR = 1.44
    HEIGHT_OFFSET = 0.328

    @staticmethod
    def max_avl_height(n: int) -> float:
        """Limite superior clássico da altura de uma AVL com n valores."""
        if n < 0:
            raise ValueError("O número de valores não pode ser negativo.")
        return AVLValidator.HEIGHT_FACTOR * math.log2(n + 2) - AVLValidator.HEIGHT_OFFSET

    @staticmethod
    def find_violations(root: Optional[AVLNode]) -> List[str]:
        """
        Percorre a árvore uma vez (O(n)) e lista todas as invariantes quebradas.
        Lista vazia significa árvore válida.
        """
        violations: List[str] = []
        AVLValidator._check(root, None, None, violations)
        return violations

    @staticmethod
    def _check(node: Optional[AVLNode], low: Any, high: Any, violations: List[str]) -> int:
        """
        Retorna a altura real da subárvore.
        low: limite inferior inclusivo herdado (valores >= low)
        high: limite superior inclusivo herdado (valores <= high)
        """
        if node is None:
            return -1

        if low is not None and node.value < low:
            violations.append(f"Nó {node.value!r}: deveria ser >= {low!r} (ordem de BST violada)")
        if high is not None and high < node.value:
            violations.append(f"Nó {node.value!r}: deveria ser <= {high!r} (ordem de BST violada)")

        left_height = AVLValidator._check(node.left, low, node.value, violations)
        right_height = AVLValidator._check(node.right, node.value, high, violations)

        real_height = 1 + max(left_height, right_height)
        if node.height != real_height:
            violations.append(f"Nó {node.value!r}: altura em cache {node.height}, real {real_height}")

        if abs(left_height - right_height) > 1:
            violations.append(
                f"Nó {node.value!r}: desbalanceado (esq={left_height}, dir={right_height})"
            )

        return real_height

    @staticmethod
    def is_valid(root: Optional[AVLNode]) -> bool:
        return not AVLValidator.find_violations(root)

    @staticmethod
    def assert_valid(root: Optional[AVLNode]):
        """Lança ValueError com todas as violações encontradas."""
        violations = AVLValidator.find_violations(root)
        if violations:
            raise ValueError("Árvore AVL inválida:\n  " + "\n  ".join(violations))
