from typing import Any, Dict, Iterator, List, Optional
from src.core.models.avl_node import AVLNode

class RotationCase:
    """Nomes dos quatro casos de rebalanceamento."""
    RIGHT_RIGHT = "RR"  # Rotação simples à esquerda
    RIGHT_LEFT = "RL"   # Rotação dupla (direita no filho, esquerda no nó)
    LEFT_LEFT = "LL"    # Rotação simples à direita
    LEFT_RIGHT = "LR"   # Rotação dupla (esquerda no filho, direita no nó)

    ALL = (RIGHT_RIGHT, RIGHT_LEFT, LEFT_LEFT, LEFT_RIGHT)

class AVLTree:
    """
    Árvore AVL: árvore binária de busca que se rebalanceia a cada inserção.

    Valores menores descem pela esquerda; valores maiores ou IGUAIS descem pela
    direita (duplicatas são aceitas, sem contagem nem rejeição).
    Garante |altura(esq) - altura(dir)| <= 1 em todo nó, logo inserção e busca
    são O(log n).
    """
    IMBALANCE_LIMIT = 2   # Diferença de altura que dispara o rebalanceamento
    EMPTY_HEIGHT = -1     # Altura de uma subárvore vazia

    def __init__(self, verbose: bool = False):
        """
        Args:
            verbose: Se True, imprime cada inserção e cada rotação aplicada.
        """
        self.root: Optional[AVLNode] = None
        self.verbose = verbose
        self._size = 0
        self._total_inserts = 0
        self._rotations: Dict[str, int] = {case: 0 for case in RotationCase.ALL}

    @staticmethod
    def get_height(node: Optional[AVLNode]) -> int:
        """Altura da subárvore lida do campo em cache, nunca recalculada (O(1))."""
        if node is None:
            return AVLTree.EMPTY_HEIGHT
        return node.height

    # --- Inserção ---

    def insert(self, value: Any) -> bool:
        """
        Insere um valor e rebalanceia a árvore automaticamente.
        Sempre retorna True: não há condição de rejeição (nem para duplicatas).
        Complexidade: O(log n)
        """
        if self.verbose:
            print(f"[AVL INSERT] Inserindo {value!r}")

        self.root = self._insert_recursive(self.root, value)
        self._size += 1
        self._total_inserts += 1
        return True

    def _insert_recursive(self, node: Optional[AVLNode], value: Any) -> AVLNode:
        # 1. Posição vazia: o novo valor vira folha
        if node is None:
            return AVLNode(value)

        # 2. Descida de BST (iguais seguem para a direita)
        if value < node.value:
            node.left = self._insert_recursive(node.left, value)
        else:
            node.right = self._insert_recursive(node.right, value)

        # 3. Na volta da recursão, cada ancestral é verificado (da folha até a raiz)
        left_height = self.get_height(node.left)
        right_height = self.get_height(node.right)
        if abs(left_height - right_height) == self.IMBALANCE_LIMIT:
            return self._balance(node)

        node.reset_height()
        return node

    # --- Rebalanceamento ---

    def _balance(self, node: AVLNode) -> AVLNode:
        """
        Escolhe a rotação para um nó com desequilíbrio exatamente 2.
        Netos de mesma altura caem no caso de rotação simples.
        """
        right_height = self.get_height(node.right)
        left_height = self.get_height(node.left)

        if right_height > left_height:
            right_child = node.right
            if self.get_height(right_child.right) >= self.get_height(right_child.left):
                return self._rr_balance(node)
            return self._rl_balance(node)

        left_child = node.left
        if self.get_height(left_child.left) >= self.get_height(left_child.right):
            return self._ll_balance(node)
        return self._lr_balance(node)

    def _record_rotation(self, case: str, pivot: AVLNode):
        self._rotations[case] += 1
        if self.verbose:
            print(f"[AVL ROTATION] Caso {case} no nó {pivot.value!r}")

    def _rr_balance(self, node: AVLNode) -> AVLNode:
        """
        Rotação simples à esquerda (caso Right-Right).

            node                 right
               \\               /     \\
               right    -->  node     rr
              /     \\           \\
             rl      rr           rl
        """
        self._record_rotation(RotationCase.RIGHT_RIGHT, node)
        right_child = node.right
        right_left = right_child.left

        right_child.left = node
        node.right = right_left

        # Filho antes do pai: a altura do pai depende da nova altura do filho
        node.reset_height()
        right_child.reset_height()
        return right_child

    def _rl_balance(self, node: AVLNode) -> AVLNode:
        """
        Rotação dupla (caso Right-Left): o neto direita-esquerda sobe para a raiz.

            node                     rl_node
               \\                   /       \\
               r_node     -->    node      r_node
              /                     \\      /
            rl_node                 rll   rlr
        """
        self._record_rotation(RotationCase.RIGHT_LEFT, node)
        r_node = node.right
        rl_node = r_node.left
        rll_tree = rl_node.left
        rlr_tree = rl_node.right

        r_node.left = rlr_tree
        node.right = rll_tree
        rl_node.left = node
        rl_node.right = r_node

        r_node.reset_height()
        node.reset_height()
        rl_node.reset_height()
        return rl_node

    def _ll_balance(self, node: AVLNode) -> AVLNode:
        """Rotação simples à direita (caso Left-Left), espelho de _rr_balance."""
        self._record_rotation(RotationCase.LEFT_LEFT, node)
        left_child = node.left
        left_right = left_child.right

        left_child.right = node
        node.left = left_right

        node.reset_height()
        left_child.reset_height()
        return left_child

    def _lr_balance(self, node: AVLNode) -> AVLNode:
        """Rotação dupla (caso Left-Right), espelho de _rl_balance."""
        self._record_rotation(RotationCase.LEFT_RIGHT, node)
        l_node = node.left
        lr_node = l_node.right
        lrl_tree = lr_node.left
        lrr_tree = lr_node.right

        l_node.right = lrl_tree
        node.left = lrr_tree
        lr_node.left = l_node
        lr_node.right = node

        l_node.reset_height()
        node.reset_height()
        lr_node.reset_height()
        return lr_node

    # --- Consulta (API de árvore binária genérica) ---

    def search(self, value: Any) -> Optional[Any]:
        """Busca um valor em O(log n). Retorna o valor armazenado ou None."""
        node = self._find_node(value)
        return node.value if node else None

    def contains(self, value: Any) -> bool:
        return self._find_node(value) is not None

    def _find_node(self, value: Any) -> Optional[AVLNode]:
        # Usa apenas "<", a única comparação exigida dos valores
        current = self.root
        while current:
            if value < current.value:
                current = current.left
            elif current.value < value:
                current = current.right
            else:
                return current
        return None

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def size(self) -> int:
        """Quantidade de valores inseridos (duplicatas contam)."""
        return self._size

    def __len__(self):
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    def get_tree_height(self) -> int:
        """Altura da árvore inteira (-1 se vazia)."""
        return self.get_height(self.root)

    def get_all_values(self) -> List[Any]:
        """Retorna todos os valores em ordem (in-order traversal)."""
        values = []
        self._in_order(self.root, values)
        return values

    def _in_order(self, node: Optional[AVLNode], values: List[Any]):
        if node:
            self._in_order(node.left, values)
            values.append(node.value)
            self._in_order(node.right, values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.get_all_values())

    def get_shape(self) -> Optional[Dict[str, Any]]:
        """
        Cópia da estrutura da árvore para quem for desenhá-la.
        Cada nó vira {'value', 'height', 'left', 'right'}; None para árvore vazia.
        """
        return self._shape_of(self.root)

    def _shape_of(self, node: Optional[AVLNode]) -> Optional[Dict[str, Any]]:
        if node is None:
            return None
        return {
            'value': node.value,
            'height': node.height,
            'left': self._shape_of(node.left),
            'right': self._shape_of(node.right)
        }

    # --- Estatísticas ---

    def get_statistics(self) -> Dict[str, Any]:
        """
        Retorna estatísticas da árvore:
        - total_inserts: Inserções desde a criação (ou o último reset)
        - size: Valores atualmente na árvore
        - height: Altura da raiz
        - rotations: Contagem por caso (RR, RL, LL, LR)
        - total_rotations: Soma de todas as rotações
        """
        return {
            'total_inserts': self._total_inserts,
            'size': self._size,
            'height': self.get_tree_height(),
            'rotations': dict(self._rotations),
            'total_rotations': sum(self._rotations.values())
        }

    def reset_statistics(self):
        """Zera os contadores de inserção e de rotação (a árvore é mantida)."""
        self._total_inserts = 0
        self._rotations = {case: 0 for case in RotationCase.ALL}

    def clear(self):
        """Remove todos os nós da árvore."""
        self.root = None
        self._size = 0

    def __repr__(self):
        return f"AVLTree(size={self._size}, height={self.get_tree_height()})"
